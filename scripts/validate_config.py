#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import Any, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from hot_prospects.config.loader import ConfigLoader
from hot_prospects.config.validation import ConfigValidator, ValidationError


def validate_merged_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None
) -> list[ValidationError]:
    """Validate defaults merged with the config file and optional overrides."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config(overrides))


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"🔍 Validating prospect tracker configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_merged_config(config_dir)
    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        config = loader.load()
        storage_path = Path(config.storage.directory).expanduser() / config.storage.file_name
        print(f"✅ Configuration is valid")
        print(f"  • storage: {storage_path}")
        print(f"  • reminders at {config.reminders.hour:02d}:{config.reminders.minute:02d}")

    print(f"\n📋 Testing explicit overrides...")
    test_overrides = {"reminders": {"hour": 8, "minute": 30}}

    errors = validate_merged_config(config_dir, test_overrides)
    if errors:
        print(f"❌ Override validation failed:")
        for error in errors:
            print(f"  • {error.field}: {error.message}")
        all_valid = False
    else:
        print(f"✅ Override validation passed")

    if all_valid:
        print(f"\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print(f"\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
