"""
Application coordinator.

Builds the store and its collaborators from configuration and exposes the
three prospect lists (Everyone, Contacted, Uncontacted). Everything is
constructed explicitly and passed by reference; there is no global store.
"""

from pathlib import Path
from typing import Any, Optional

import structlog

from .config.defaults import AppConfig
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .logging.config import configure_logging
from .notifications import InMemoryNotificationCenter, NotificationCenter, ReminderScheduler
from .persistence.file_storage import ProspectFileStorage
from .presentation import FilterType, ProspectListViewModel
from .scanning import ScanIngestor, ScanResult
from .store import ProspectStore

logger = structlog.get_logger(__name__)


class ProspectsApplication:
    """Wires configuration, storage, store, collaborators and list views."""

    def __init__(
        self,
        config: AppConfig,
        notification_center: Optional[NotificationCenter] = None
    ) -> None:
        self.config = config

        self.storage = ProspectFileStorage.from_params(config.storage)
        self.store = ProspectStore(
            self.storage,
            pretty=config.storage.pretty,
            quarantine_unreadable=config.storage.quarantine_unreadable
        )
        self.notification_center = notification_center or InMemoryNotificationCenter()
        self.scheduler = ReminderScheduler(self.notification_center, config.reminders)
        self.ingestor = ScanIngestor(self.store, separator=config.scan.separator)

        self.views = {
            filter_type: ProspectListViewModel(
                self.store,
                filter_type,
                scheduler=self.scheduler,
                ingestor=self.ingestor
            )
            for filter_type in FilterType
        }

        logger.info(
            "Prospects application initialized",
            path=str(self.storage.path),
            count=len(self.store)
        )

    @classmethod
    def from_config_dir(
        cls,
        config_dir: Optional[Path] = None,
        overrides: Optional[dict[str, Any]] = None,
        notification_center: Optional[NotificationCenter] = None,
        setup_logging: bool = True
    ) -> "ProspectsApplication":
        """
        Load and validate configuration, then build the application.

        Raises:
            ValueError: If the merged configuration is invalid
        """
        loader = ConfigLoader.create(config_dir)
        merged = loader.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = "; ".join(f"{e.field}: {e.message} (value: {e.value!r})" for e in errors)
            raise ValueError(f"Invalid configuration: {details}")

        config = loader.to_app_config(merged)

        if setup_logging:
            configure_logging(
                level=config.logging.level,
                format_json=config.logging.format_json,
                include_caller=config.logging.include_caller
            )

        return cls(config, notification_center=notification_center)

    def view(self, filter_type: FilterType) -> ProspectListViewModel:
        return self.views[filter_type]

    def simulate_scan(self, payload: Optional[str] = None):
        """Feed the configured simulated payload through the scanner path."""
        payload = self.config.scan.simulated_payload if payload is None else payload
        return self.ingestor.handle_scan(ScanResult.success(payload))

    def close(self) -> None:
        for view in self.views.values():
            view.close()
