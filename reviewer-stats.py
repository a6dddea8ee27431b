#!/usr/bin/env python3
"""
Reviewer Workload Stats
Reports reviewer assignment workload across pull requests.
"""

from review_workload.cli import main


if __name__ == "__main__":
    main()
