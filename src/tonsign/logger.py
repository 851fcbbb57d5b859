"""
Logging
Category-tagged in-memory logger for sign / verify events
"""
import time
from typing import List, Dict, Optional


class Logger:
    """
    Records SIGN / VERIFY events.

    Each record carries the stage that rejected the input (domain, address,
    payload) when there was one, so callers can tell why a check failed.
    """

    def __init__(self, component: str, verbose: bool = True):
        self.component = component
        self.verbose = verbose
        self.logs = []

    def log(self, category: str, message: str, stage: Optional[str] = None):
        """Log a message, optionally tagged with the failing stage"""
        self.logs.append({
            "timestamp": time.time(),
            "component": self.component,
            "category": category,
            "stage": stage,
            "message": message
        })
        if self.verbose:
            tag = f" [{stage}]" if stage else ""
            print(f"[{self.component}] [{category}]{tag} {message}")

    def get_logs(self, category: Optional[str] = None) -> List[Dict]:
        """Get all logs, or only those of one category"""
        if category is None:
            return self.logs
        return [entry for entry in self.logs if entry["category"] == category]

    def rejections(self) -> List[Dict]:
        """Records where some stage rejected the input"""
        return [entry for entry in self.logs if entry["stage"] is not None]
