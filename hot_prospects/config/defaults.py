"""Default configuration parameters for the prospect tracker."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageParams:
    """Where and how the prospect list is persisted."""
    directory: str = "~/.hot_prospects"          # Application-private data dir
    file_name: str = "SavedData"                 # Single file holding the list
    file_mode: int = 0o600                       # Owner read/write only
    fsync: bool = True                           # Flush to disk before rename
    pretty: bool = False                         # Indent the JSON document
    quarantine_unreadable: bool = True           # Move corrupt files aside on load


@dataclass(frozen=True)
class ReminderParams:
    """Local reminder parameters."""
    hour: int = 9
    minute: int = 0
    title_template: str = "Contact {name}"
    sound: str = "default"
    authorization_options: tuple[str, ...] = ("alert", "badge", "sound")


@dataclass(frozen=True)
class ScanParams:
    """QR payload parsing parameters."""
    separator: str = "\n"
    simulated_payload: str = "Paul Hudson\npaul@hackingwithswift.com"


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False
    include_caller: bool = False


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    storage: StorageParams
    reminders: ReminderParams
    scan: ScanParams
    logging: LoggingParams


def get_default_config() -> AppConfig:
    """Get the default configuration instance."""
    return AppConfig(
        storage=StorageParams(),
        reminders=ReminderParams(),
        scan=ScanParams(),
        logging=LoggingParams(),
    )
