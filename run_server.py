#!/usr/bin/env python3
"""
Convenience script to run the redirect server.

    python run_server.py --yaml=rules.yml
"""
from urlshort.cli import main

if __name__ == "__main__":
    main()
