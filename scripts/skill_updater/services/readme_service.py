#------------------------------------------------------------
#                      readme_service.py
#             Provides helpers to read, write, and
#             replace identified README elements.

import re
import sys
from typing import Optional, Tuple
from ..config import SKILLS_SECTION_ID, SKILLS_SECTION_TAG

OPEN_TAG_PATTERN_TEMPLATE = r"<{tag}\b[^>]*?\sid\s*=\s*([\"']){element_id}\1[^>]*>"
SAME_KIND_TAG_PATTERN_TEMPLATE = r"<(/?){tag}\b[^>]*?(/?)>"
SECTION_NOT_FOUND_TEMPLATE = "Could not find {tag} with id {element_id!r} in README.md"
UNCLOSED_ELEMENT_TEMPLATE = "Could not find end of {tag} with id {element_id!r} in README.md"
MISSING_ELEMENT_WARNING_TEMPLATE = "WARNING: element not found: <{tag} id={element_id!r}>"


class ReadmeSectionError(RuntimeError):
    pass


class SectionNotFoundError(ReadmeSectionError):
    pass


class UnclosedElementError(ReadmeSectionError):
    pass


# This function does locate an element by tag name and id attribute.
# It walks same-kind tags with a depth counter so nested children
# do not end the element early. Returns (begin, end) or None.
def find_element_span(content: str, tag: str, element_id: str, start: int = 0) -> Optional[Tuple[int, int]]:
    open_pattern = re.compile(
        OPEN_TAG_PATTERN_TEMPLATE.format(tag=re.escape(tag), element_id=re.escape(element_id)),
        re.IGNORECASE,
    )
    opening = open_pattern.search(content, start)
    if opening is None:
        return None
    if opening.group(0).endswith("/>"):
        return opening.start(), opening.end()

    tag_pattern = re.compile(SAME_KIND_TAG_PATTERN_TEMPLATE.format(tag=re.escape(tag)), re.IGNORECASE)
    depth = 1
    for match in tag_pattern.finditer(content, opening.end()):
        is_closing, is_self_closing = match.group(1), match.group(2)
        if is_closing:
            depth -= 1
            if depth == 0:
                return opening.start(), match.end()
        elif not is_self_closing:
            depth += 1

    raise UnclosedElementError(UNCLOSED_ELEMENT_TEMPLATE.format(tag=tag, element_id=element_id))

# This function does replace the first element carrying the given id.
# It returns the new content and whether a replacement happened.
def replace_element(content: str, tag: str, element_id: str, replacement: str) -> Tuple[str, bool]:
    span = find_element_span(content, tag, element_id)
    if span is None:
        print(MISSING_ELEMENT_WARNING_TEMPLATE.format(tag=tag, element_id=element_id), file=sys.stderr)
        return content, False
    begin, end = span
    return content[:begin] + replacement + content[end:], True

# This function does locate the skills section or raise.
# Missing markers are fatal, unlike the fragment replacements above.
def ensure_skills_section(content: str) -> Tuple[int, int]:
    span = find_element_span(content, SKILLS_SECTION_TAG, SKILLS_SECTION_ID)
    if span is None:
        raise SectionNotFoundError(
            SECTION_NOT_FOUND_TEMPLATE.format(tag=SKILLS_SECTION_TAG, element_id=SKILLS_SECTION_ID)
        )
    return span

def update_skills_section(content: str, section_markup: str) -> str:
    begin, end = ensure_skills_section(content)
    return content[:begin] + section_markup + content[end:]

# This function does load README text from the given path.
# It reads file content as UTF-8 and returns it.
def load_readme(path: str) -> str:
    with open(path, "r", encoding="utf-8", newline="") as file_handle:
        return file_handle.read()

# This function does save README text to the given path.
# It writes UTF-8 content to overwrite the target file.
def save_readme(path: str, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as file_handle:
        file_handle.write(content)
