#!/usr/bin/env python3
"""Development server for the moto transport API."""

from moto_api.main import main

if __name__ == "__main__":
    main()
