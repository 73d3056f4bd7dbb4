#------------------------------------------------------------
#                      markdown_view.py
#          Renders progress bars, the experience lines
#                and the skill table section.

import math
from datetime import datetime
from typing import Dict, List, Tuple
from ..config import (
    BAR_EMPTY_GLYPH,
    BAR_FILLED_GLYPH,
    DEFAULT_BAR_WIDTH,
    DEFAULT_MAX_TABLE_ROWS,
    SKILL_COLUMN_WIDTH,
    SKILL_TABLE_HEADER,
    SKILLS_SECTION_ID,
    TIMESTAMP_FORMAT,
)
from ..models import ExperienceUpdate, LanguageStat

LEVEL_LINE_TEMPLATE = (
    '<li style="text-align: left" id="level"><strong>Level</strong> '
    "{current} → {next} ({to_next} EXP to next)</li>"
)
EXP_LINE_TEMPLATE = (
    '<li style="text-align: left; display: flex; align-items: center; gap: 10px;" id="exp">'
    "<strong>Total Experience</strong> `{new_exp} / {exp_cap} EXP` | {bar} ({percent}%)</li>"
)
SKILL_ROW_TEMPLATE = "| {name} | Lv. {level} | {bar} | {percent:.2f}% |\n"
SKILLS_SECTION_TEMPLATE = (
    '<section id="{section_id}">\n'
    '<h2 style="color:#D9934C"> 📊 Top Skills</h2>\n\n'
    "{table}\n"
    "_Generated by GitHub API_\n\n"
    "Last updated: {updated_at}\n\n"
    "</section>"
)

# This function does render a fixed-width glyph progress bar.
# Out-of-range percentages are clamped so the width never changes.
def render_bar(percent: float, width: int = DEFAULT_BAR_WIDTH) -> str:
    filled = math.floor(percent / 100 * width)
    filled = max(0, min(width, filled))
    return BAR_FILLED_GLYPH * filled + BAR_EMPTY_GLYPH * (width - filled)

def render_level_line(update: ExperienceUpdate) -> str:
    return LEVEL_LINE_TEMPLATE.format(
        current=update.level.current_level,
        next=update.level.next_level,
        to_next=update.level.exp_to_next,
    )

def render_exp_line(update: ExperienceUpdate, exp_cap: int) -> str:
    return EXP_LINE_TEMPLATE.format(
        new_exp=update.new_exp,
        exp_cap=exp_cap,
        bar=update.bar,
        percent=update.percent_text,
    )

# This function does rank languages by share of bytes.
# sorted() is stable, so equal shares keep their input order.
def rank_languages(stats: Dict[str, LanguageStat], max_rows: int = DEFAULT_MAX_TABLE_ROWS) -> List[Tuple[str, LanguageStat]]:
    ranked = sorted(stats.items(), key=lambda item: item[1].percent, reverse=True)
    return ranked[:max_rows]

# This function does render the markdown skill table.
# It emits the fixed header and one row per ranked language.
def render_skill_table(
    stats: Dict[str, LanguageStat],
    max_rows: int = DEFAULT_MAX_TABLE_ROWS,
    bar_width: int = DEFAULT_BAR_WIDTH,
) -> str:
    rows = [SKILL_TABLE_HEADER]
    for language, stat in rank_languages(stats, max_rows):
        rows.append(
            SKILL_ROW_TEMPLATE.format(
                name=language.ljust(SKILL_COLUMN_WIDTH),
                level=stat.level,
                bar=render_bar(stat.percent, bar_width),
                percent=stat.percent,
            )
        )
    return "".join(rows)

def render_skills_section(table: str, updated_at: datetime) -> str:
    return SKILLS_SECTION_TEMPLATE.format(
        section_id=SKILLS_SECTION_ID,
        table=table,
        updated_at=updated_at.strftime(TIMESTAMP_FORMAT).strip(),
    )
