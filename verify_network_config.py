#!/usr/bin/env python3
"""
Check every address in the network config: each one must be either empty
(not deployed) or a valid account address. Lowercase addresses are accepted
but reported, since they are checksummed when the registry loads.
"""

import sys

from eth_utils import is_address, is_checksum_address

from network_config import ADDRESS_FIELDS, DEFAULT_KEY, NETWORK_CONFIG


def check_entry(entry):
    """Return (errors, warnings) for one raw network entry, each a list of (field, value, problem)"""
    errors = []
    warnings = []
    for key in ADDRESS_FIELDS:
        value = entry.get(key, "")
        if not isinstance(value, str):
            errors.append((key, value, "not a string"))
        elif value and not is_address(value):
            errors.append((key, value, "not a valid address"))
        elif value and not is_checksum_address(value):
            warnings.append((key, value, "not checksummed"))
    return errors, warnings


def main():
    print("Verifying network config addresses:\n")

    all_valid = True
    for key, entry in NETWORK_CONFIG.items():
        label = "default" if key == DEFAULT_KEY else key
        deployed = sum(1 for field in ADDRESS_FIELDS if entry.get(field))
        print(f"{entry['name'].upper()} ({label}): {deployed}/{len(ADDRESS_FIELDS)} contracts deployed")

        errors, warnings = check_entry(entry)
        for field, value, problem in warnings:
            print(f"  ⚠️  {field}: {value} ({problem})")
        for field, value, problem in errors:
            print(f"  ❌ {field}: {value!r} ({problem})")
        if errors:
            all_valid = False
        else:
            print("  ✅ OK")
        print()

    if all_valid:
        print("🎉 All network config addresses are valid!")
    else:
        print("❌ Some network config addresses are malformed.")
    return all_valid


if __name__ == "__main__":
    sys.exit(0 if main() else 1)
