#------------------------------------------------------------
#                    experience_service.py
#          Computes levels from the stored EXP total and
#             rewrites the level and EXP fragments.

import re
from typing import Optional, Tuple
from ..config import (
    DEFAULT_BASE_LEVEL_EXP,
    EXP_ELEMENT_ID,
    EXP_ELEMENT_TAG,
    LEVEL_ELEMENT_ID,
    LEVEL_ELEMENT_TAG,
)
from ..models import ExperienceUpdate, LevelInfo, UpdateConfig
from ..views.markdown_view import render_bar, render_exp_line, render_level_line
from .readme_service import load_readme, replace_element, save_readme

EXP_PATTERN_TEMPLATE = r"`(\d+)\s*/\s*{exp_cap} EXP`"
EXP_UPDATED_MESSAGE = "EXP updated: {old} -> {new} ({percent}%)"
LEVEL_MESSAGE = "Level {current} → {next}, need {to_next} EXP for next level"

# This function does convert a cumulative EXP total into level info.
# Level N costs base_exp * N, so thresholds grow triangularly.
def calculate_level(exp: int, base_exp: int = DEFAULT_BASE_LEVEL_EXP) -> LevelInfo:
    if exp < 0:
        raise ValueError(f"experience must be non-negative, got {exp}")
    remaining = exp
    level = 1
    while remaining >= base_exp * level:
        remaining -= base_exp * level
        level += 1
    return LevelInfo(current_level=level, next_level=level + 1, exp_to_next=base_exp * level - remaining)

# This function does increment the EXP counter found in the document.
# It returns the content unchanged and None when no counter matches
# or when the exp element that would carry the new value is missing.
def update_experience(content: str, config: UpdateConfig) -> Tuple[str, Optional[ExperienceUpdate]]:
    match = re.search(EXP_PATTERN_TEMPLATE.format(exp_cap=config.exp_cap), content)
    if match is None:
        return content, None

    old_exp = int(match.group(1))
    new_exp = old_exp + 1
    percent_text = f"{new_exp / config.exp_cap * 100:.1f}"
    update = ExperienceUpdate(
        old_exp=old_exp,
        new_exp=new_exp,
        percent_text=percent_text,
        bar=render_bar(float(percent_text), config.bar_width),
        level=calculate_level(new_exp),
    )

    updated, replaced = replace_element(content, EXP_ELEMENT_TAG, EXP_ELEMENT_ID, render_exp_line(update, config.exp_cap))
    if not replaced:
        return content, None
    updated, _ = replace_element(updated, LEVEL_ELEMENT_TAG, LEVEL_ELEMENT_ID, render_level_line(update))
    return updated, update

def apply_experience_update(path: str, config: UpdateConfig) -> Optional[ExperienceUpdate]:
    content, update = update_experience(load_readme(path), config)
    if update is None:
        return None

    save_readme(path, content)
    print(EXP_UPDATED_MESSAGE.format(old=update.old_exp, new=update.new_exp, percent=update.percent_text))
    print(
        LEVEL_MESSAGE.format(
            current=update.level.current_level,
            next=update.level.next_level,
            to_next=update.level.exp_to_next,
        )
    )
    return update
