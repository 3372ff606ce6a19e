"""
Daily recycle bin cleanup job
"""
import json
import threading
from datetime import date, datetime
from pathlib import Path
from typing import Callable, Dict, List, Optional

import schedule
import structlog

from pickup_tracker.core.clock import to_iso, utc_now
from pickup_tracker.services.recycle_bin_service import RecycleBinService

logger = structlog.get_logger()


class CleanupScheduler:
    """
    Runs RecycleBinService.auto_cleanup once at start and then every day at
    a fixed wall-clock time.

    The daily run stores its date in a state file and is skipped when that
    date is already today, so a restart during the run minute does not purge
    twice. Cleanup itself is idempotent either way.
    """

    def __init__(
        self,
        recycle_bin_service: RecycleBinService,
        state_path: Path,
        run_at: str = "02:00",
        poll_seconds: int = 30,
        today: Callable[[], date] = date.today,
    ):
        self.recycle_bin_service = recycle_bin_service
        self.state_path = Path(state_path)
        self.run_at = run_at
        self.poll_seconds = poll_seconds
        self.today = today
        self.scheduler = schedule.Scheduler()
        self.running = False
        self.thread = None
        self._stop_event = threading.Event()
        self._run_lock = threading.Lock()
        self.last_run_at: Optional[datetime] = None
        self.last_purged: List[str] = []

    def start(self):
        """Startup cleanup, then the polling thread"""
        if self.running:
            return

        try:
            self.run_now(trigger="startup")
        except Exception as e:
            logger.error("Startup cleanup failed", error=str(e))

        self.scheduler.clear()
        self.scheduler.every().day.at(self.run_at).do(self._daily_job)

        self.running = True
        self._stop_event.clear()
        self.thread = threading.Thread(target=self._loop, name="recycle-bin-cleanup", daemon=True)
        self.thread.start()
        logger.info("Cleanup scheduler started", run_at=self.run_at, poll_seconds=self.poll_seconds)

    def stop(self):
        self.running = False
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=5)
        self.scheduler.clear()
        logger.info("Cleanup scheduler stopped")

    def _loop(self):
        while self.running:
            try:
                self.scheduler.run_pending()
            except Exception as e:
                logger.error("Cleanup scheduler error", error=str(e))
            self._stop_event.wait(self.poll_seconds)

    def _daily_job(self):
        today = self.today().isoformat()
        state = self._load_state()
        if state.get("last_run_date") == today:
            logger.info("Daily cleanup already ran today; skipping", date=today)
            return

        try:
            purged = self.run_now(trigger="daily")
        except Exception as e:
            logger.error("Daily cleanup failed", error=str(e))
            return

        self._save_state({
            "last_run_date": today,
            "last_run_at": to_iso(self.last_run_at),
            "last_purged": len(purged),
        })

    def run_now(self, trigger: str = "manual") -> List[str]:
        """Run cleanup immediately and return the purged order numbers"""
        with self._run_lock:
            logger.info("Recycle bin cleanup triggered", trigger=trigger)
            purged = self.recycle_bin_service.auto_cleanup()
            self.last_run_at = utc_now()
            self.last_purged = purged
            return purged

    def get_status(self) -> Dict:
        next_run = self.scheduler.next_run if self.scheduler.jobs else None
        return {
            "running": self.running,
            "run_at": self.run_at,
            "poll_seconds": self.poll_seconds,
            "last_run_at": to_iso(self.last_run_at) if self.last_run_at else None,
            "last_purged": len(self.last_purged),
            "next_run": next_run.isoformat() if next_run else None,
            "last_daily_run_date": self._load_state().get("last_run_date"),
            "thread_alive": self.thread.is_alive() if self.thread else False,
        }

    def _load_state(self) -> Dict:
        if not self.state_path.exists():
            return {}
        try:
            with open(self.state_path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Cleanup state unreadable; treating as never run", error=str(e))
            return {}

    def _save_state(self, state: Dict):
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.state_path, "w", encoding="utf-8") as f:
                json.dump(state, f, indent=2)
        except OSError as e:
            logger.error("Failed to save cleanup state", error=str(e))
