#!/usr/bin/env python3
"""
Update the gamified README: bump the stored EXP counter, recompute the
level line, and regenerate the "Top Skills" table from the GitHub API.

Elements used in README.md:
  <li id="level">...</li>
  <li id="exp">... `<n> / 2200 EXP` ...</li>
  <section id="skills-section"> ... </section>

Environment variables:
  GITHUB_USERNAME: GitHub account whose repositories are ranked (default: chious)
  GITHUB_TOKEN: Optional token, raises the API rate limit
  EXP_CAP, BAR_WIDTH, MAX_TABLE_ROWS: Display tuning (defaults 2200, 14, 10)
  README_PATH: Document to update (default: README.md at the repository root)
  UPDATE_TIMEZONE: Zone name for the "Last updated" stamp (default: local time)
"""

import sys

from skill_updater.controller import main

if __name__ == "__main__":
    sys.exit(main())
