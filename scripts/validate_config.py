#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from market_ta.config.loader import ConfigLoader
from market_ta.config.validation import ConfigValidator, ValidationError
from market_ta.errors import ConfigurationError


def validate_market_config(loader: ConfigLoader, market_id: str) -> List[ValidationError]:
    """Validate merged configuration for a specific market."""
    return ConfigValidator.validate_config(loader.merge_config(market_id))


def main():
    """Main validation function."""
    print("🔍 Validating market-ta configuration...")

    loader = ConfigLoader.create()

    markets = ["Java", "Papua", "Sumatra", "UNKNOWN-MARKET"]  # unknown markets use defaults
    all_valid = True

    for market_id in markets:
        print(f"\n📊 Validating {market_id}...")

        errors = validate_market_config(loader, market_id)
        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
            continue

        try:
            loader.load_config(market_id)
        except ConfigurationError as e:
            print(f"❌ {market_id}: {e}")
            all_valid = False
        else:
            print(f"✅ {market_id} configuration is valid")

    print("\n📋 Testing per-call overrides...")
    test_overrides = {
        "bollinger": {"window": 10, "multiplier": 2.5},
        "trend": {"threshold": 0.005},
    }

    try:
        loader.load_config("Java", test_overrides)
        print("✅ Override validation passed")
    except ConfigurationError as e:
        print(f"❌ Override validation failed: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
