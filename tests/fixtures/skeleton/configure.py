#!/usr/bin/env python3
"""Personalize this package skeleton: replaces :vendor_name, :package_name, VendorName, Skeleton..."""

from configurator.pipeline import main

if __name__ == "__main__":
    main()
