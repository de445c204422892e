"""
Heuristic field extractors for resume sections.

Each extractor is an independent pure function from section text to a piece
of a draft record (plain dicts and lists). Extractors are best-effort: empty
or malformed input yields empty results, never an exception.
"""

import re
from typing import Dict, List, Optional, Tuple

from tailor.contexts.intake.extraction_patterns import (
    FALLBACK_SKILL_CATEGORY,
    LINK_KIND_PROBES,
    SKILL_CATEGORY_PATTERNS,
    SKILL_LINE_LABEL,
    TECHNOLOGY_PATTERNS,
    URL_TRAILING_PUNCTUATION,
    ContactPatterns,
    DatePatterns,
    EducationPatterns,
)
from tailor.contexts.intake.records import is_valid_email
from tailor.contexts.intake.section_patterns import (
    is_bullet_line,
    match_resume_header,
    strip_bullet,
)
from tailor.utils.text_processing import collapse_whitespace, dedupe_preserving_order, non_blank_lines

# Unmarked lines this long or shorter are dropped by bullet extraction
MIN_UNMARKED_BULLET_LENGTH = 20

# Header lines at least this long are prose, not entry headers
MAX_EXPERIENCE_HEADER_LENGTH = 100
MAX_PROJECT_HEADER_LENGTH = 80
MAX_EDUCATION_DETAIL_LENGTH = 80

# Name must appear within the first few non-empty lines
NAME_SEARCH_LINES = 5

SKILL_CATEGORIES = ("languages", "frameworks", "gpu_graphics", "systems_tools")


# =============================================================================
# SHARED HELPERS
# =============================================================================


def extract_bullets(text: str) -> List[str]:
    """
    Extract bullet items from a block of text.

    A line starting with a bullet glyph or numbered prefix is a bullet (prefix
    stripped). An unmarked line longer than MIN_UNMARKED_BULLET_LENGTH continues
    the previous bullet, or starts one if none is open. Shorter unmarked lines
    are dropped.

    Example:
        >>> extract_bullets("• Built system X\\n• Improved Y by 30%")
        ['Built system X', 'Improved Y by 30%']
    """
    bullets: List[str] = []
    for line in non_blank_lines(text or ""):
        if is_bullet_line(line):
            content = strip_bullet(line)
            if content:
                bullets.append(content)
        elif len(line) > MIN_UNMARKED_BULLET_LENGTH:
            if bullets:
                bullets[-1] = f"{bullets[-1]} {line}"
            else:
                bullets.append(line)
    return bullets


def find_urls(text: str) -> List[str]:
    """
    Find URLs in text, trimming trailing prose punctuation.

    Scheme-less linkedin.com / github.com profile URLs are included with an
    https:// prefix. Duplicates are dropped.
    """
    urls = [match.group(0).rstrip(URL_TRAILING_PUNCTUATION) for match in ContactPatterns.URL.finditer(text)]
    urls.extend(
        "https://" + match.group(0).rstrip(URL_TRAILING_PUNCTUATION)
        for match in ContactPatterns.BARE_PROFILE_URL.finditer(text)
    )
    return dedupe_preserving_order(url for url in urls if url)


def classify_link(url: str) -> str:
    """
    Classify a URL as linkedin, github, portfolio or other.

    Example:
        >>> classify_link("https://www.linkedin.com/in/jdoe")
        'linkedin'
        >>> classify_link("https://jdoe.dev")
        'other'
    """
    lowered = url.lower()
    for kind, probes in LINK_KIND_PROBES:
        if any(probe in lowered for probe in probes):
            return kind
    return "other"


def make_links(urls: List[str]) -> List[Dict[str, str]]:
    """Build link dicts for a list of URLs."""
    return [{"kind": classify_link(url), "url": url} for url in urls]


def remove_urls(text: str) -> str:
    """Strip URLs from a line and tidy the separators left behind."""
    text = ContactPatterns.URL.sub("", text)
    text = ContactPatterns.BARE_PROFILE_URL.sub("", text)
    return DatePatterns.TRAILING_SEPARATORS.sub("", collapse_whitespace(text))


def detect_technologies(text: str) -> List[str]:
    """
    Tag text with canonical technology names from the curated catalog.

    Returns names in catalog order.

    Example:
        >>> detect_technologies("Ported the renderer from OpenGL to Vulkan in C++")
        ['C++', 'OpenGL', 'Vulkan']
    """
    if not text:
        return []
    return [name for name, pattern in TECHNOLOGY_PATTERNS if pattern.search(text)]


def _split_dates(line: str) -> Tuple[str, Optional[str], Optional[str]]:
    """
    Split a header line into (text before the dates, start date, end date).

    A date range fills both dates; a lone date fills only the start.
    "present"/"current" end dates are returned as None.
    """
    range_match = DatePatterns.DATE_RANGE.search(line)
    if range_match:
        end = range_match.group(2)
        if DatePatterns.ONGOING.fullmatch(end):
            end = None
        return line[: range_match.start()], range_match.group(1), end

    single_match = DatePatterns.SINGLE_DATE.search(line)
    if single_match:
        return line[: single_match.start()], single_match.group(0), None

    ongoing_match = DatePatterns.ONGOING.search(line)
    if ongoing_match:
        return line[: ongoing_match.start()], None, None

    return line, None, None


def _clean_fragment(text: str) -> str:
    return DatePatterns.TRAILING_SEPARATORS.sub("", collapse_whitespace(text)).strip()


# =============================================================================
# IDENTITY
# =============================================================================


def extract_email(text: str) -> Optional[str]:
    """First address-shaped match that also passes record validation."""
    for match in ContactPatterns.EMAIL.finditer(text):
        candidate = match.group(0).rstrip(".")
        if is_valid_email(candidate):
            return candidate
    return None


def extract_phone(text: str) -> Optional[str]:
    match = ContactPatterns.PHONE.search(text)
    return match.group(0).strip() if match else None


def extract_name(text: str) -> str:
    """
    Take the first meaningful line as the candidate's name.

    Document title lines ("Resume", "Curriculum Vitae") and contact-only lines
    are skipped. When contact details share the name line ("Jane Doe | jane@x.com"),
    only the leading segment is kept.
    """
    for line in non_blank_lines(text)[:NAME_SEARCH_LINES]:
        if ContactPatterns.DOCUMENT_TITLE.search(line):
            continue
        if match_resume_header(line):
            break

        segment = ContactPatterns.INLINE_SEPARATOR.split(strip_bullet(line))[0].strip()
        if not segment or "@" in segment or "://" in segment or ContactPatterns.PHONE.search(segment):
            continue
        return segment
    return ""


def extract_identity(text: str) -> Dict:
    """
    Extract name, contact details and links from a whole resume body.

    Returns:
        Identity draft dict
    """
    text = text or ""
    return {
        "name": extract_name(text),
        "headline": None,
        "email": extract_email(text),
        "phone": extract_phone(text),
        "location": None,
        "links": make_links(find_urls(text)),
    }


# =============================================================================
# SUMMARY
# =============================================================================


def extract_summary(text: str) -> Optional[str]:
    """Join the summary section into a single paragraph."""
    lines = [strip_bullet(line) if is_bullet_line(line) else line for line in non_blank_lines(text or "")]
    summary = collapse_whitespace(" ".join(lines))
    return summary or None


# =============================================================================
# EXPERIENCE
# =============================================================================


def _is_experience_header(line: str) -> bool:
    if is_bullet_line(line) or len(line) >= MAX_EXPERIENCE_HEADER_LENGTH:
        return False
    return bool(DatePatterns.YEAR.search(line) or DatePatterns.ONGOING.search(line))


def parse_experience_header(line: str) -> Dict:
    """
    Parse a date-bearing experience header line.

    The text before the dates is split on "|" or ",": two parts are
    (title, company), three are (title, company, location), one is the company.

    Example:
        >>> entry = parse_experience_header("Software Engineer | Acme Corp | Jan 2020 - Present")
        >>> entry["title"], entry["company"], entry["start_date"], entry["end_date"]
        ('Software Engineer', 'Acme Corp', 'Jan 2020', None)
    """
    prefix, start, end = _split_dates(line)
    parts = [part.strip() for part in re.split(r"[|,]", _clean_fragment(prefix)) if part.strip()]

    entry = {
        "company": "",
        "title": "",
        "location": None,
        "start_date": start or "",
        "end_date": end,
        "bullets": [],
        "tech": [],
    }
    if len(parts) >= 2:
        entry["title"], entry["company"] = parts[0], parts[1]
        if len(parts) >= 3:
            entry["location"] = ", ".join(parts[2:])
    elif parts:
        entry["company"] = parts[0]
    return entry


def extract_experience(text: str) -> List[Dict]:
    """
    Extract experience entries from the experience section.

    An entry opens on a date-bearing header line; lines before the first such
    line are ignored. Body lines go through bullet extraction and the bullets
    are tagged with catalog technologies.
    """
    entries: List[Dict] = []
    body: List[str] = []

    def close() -> None:
        if entries:
            entries[-1]["bullets"] = extract_bullets("\n".join(body))
            entries[-1]["tech"] = detect_technologies(" ".join(entries[-1]["bullets"]))

    for line in non_blank_lines(text or ""):
        if _is_experience_header(line):
            close()
            entries.append(parse_experience_header(line))
            body = []
        elif entries:
            body.append(line)

    close()
    return entries


# =============================================================================
# EDUCATION
# =============================================================================


def _empty_education() -> Dict:
    return {
        "school": "",
        "degree": "",
        "field": None,
        "location": None,
        "start_date": None,
        "end_date": None,
        "gpa": None,
    }


def parse_education_line(line: str) -> Dict:
    """
    Parse an education line that carries a year or institution/degree keyword.

    Example:
        >>> entry = parse_education_line("Stanford University, B.S. Computer Science, 2016 - 2020")
        >>> entry["school"], entry["degree"], entry["start_date"], entry["end_date"]
        ('Stanford University', 'B.S. Computer Science', '2016', '2020')
    """
    entry = _empty_education()

    gpa_match = EducationPatterns.GPA.search(line)
    if gpa_match:
        entry["gpa"] = re.sub(r"\s+", "", gpa_match.group(1))
        line = line[: gpa_match.start()] + line[gpa_match.end() :]

    range_match = DatePatterns.DATE_RANGE.search(line)
    if range_match:
        entry["start_date"] = range_match.group(1)
        end = range_match.group(2)
        entry["end_date"] = None if DatePatterns.ONGOING.fullmatch(end) else end
        line = line[: range_match.start()] + line[range_match.end() :]
    else:
        years = DatePatterns.YEAR.findall(line)
        if len(years) >= 2:
            entry["start_date"], entry["end_date"] = years[0], years[-1]
        elif years:
            entry["end_date"] = years[0]
        line = DatePatterns.SINGLE_DATE.sub("", line)

    parts = [_clean_fragment(part) for part in re.split(r"[,|]", line)]
    parts = [part for part in parts if part]

    school_index = next(
        (i for i, part in enumerate(parts) if EducationPatterns.INSTITUTION.search(part)), None
    )
    if school_index is None:
        entry["degree"] = ", ".join(parts)
        return entry

    entry["school"] = parts[school_index]
    rest = parts[:school_index] + parts[school_index + 1 :]
    degree_index = next(
        (i for i, part in enumerate(rest) if EducationPatterns.DEGREE.search(part)), 0 if rest else None
    )
    if degree_index is not None:
        entry["degree"] = rest.pop(degree_index)
    if rest:
        entry["location"] = ", ".join(rest)
    return entry


def _fills_open_slots(current: Dict, parsed: Dict) -> bool:
    """True if parsed only supplies school/degree slots the current entry lacks."""
    return all(not (parsed[slot] and current[slot]) for slot in ("school", "degree"))


def _merge_education(current: Dict, parsed: Dict) -> None:
    for key, value in parsed.items():
        if value and not current[key]:
            current[key] = value


def extract_education(text: str) -> List[Dict]:
    """
    Extract education entries from the education section.

    A line with a year or an institution/degree keyword either opens a new
    entry or, when it only fills slots the current entry is missing (a school
    line after a degree line), is merged into the current entry. Other short
    lines fill school first, then field of study. "GPA: x" fills gpa.
    """
    entries: List[Dict] = []

    for line in non_blank_lines(text or ""):
        if is_bullet_line(line):
            line = strip_bullet(line)

        is_keyed = bool(
            DatePatterns.YEAR.search(line)
            or EducationPatterns.INSTITUTION.search(line)
            or EducationPatterns.DEGREE.search(line)
        )

        if is_keyed:
            parsed = parse_education_line(line)
            if entries and _fills_open_slots(entries[-1], parsed):
                _merge_education(entries[-1], parsed)
            else:
                entries.append(parsed)
            continue

        if not entries:
            continue

        current = entries[-1]
        gpa_match = EducationPatterns.GPA.search(line)
        if gpa_match:
            current["gpa"] = current["gpa"] or re.sub(r"\s+", "", gpa_match.group(1))
        elif len(line) < MAX_EDUCATION_DETAIL_LENGTH:
            if not current["school"]:
                current["school"] = line
            elif not current["field"]:
                current["field"] = line

    return entries


# =============================================================================
# SKILLS
# =============================================================================


def categorize_skill(token: str) -> str:
    """
    Assign a skill token to its category (first matching category wins).

    Example:
        >>> categorize_skill("C++"), categorize_skill("Django"), categorize_skill("Vulkan")
        ('languages', 'frameworks', 'gpu_graphics')
        >>> categorize_skill("Kubernetes")
        'systems_tools'
    """
    for category, pattern in SKILL_CATEGORY_PATTERNS:
        if pattern.search(token):
            return category
    return FALLBACK_SKILL_CATEGORY


def tokenize_skills(text: str) -> List[str]:
    """Split skills section text into tokens on "," and ";" (line labels dropped)."""
    tokens = []
    for line in non_blank_lines(text or ""):
        if is_bullet_line(line):
            line = strip_bullet(line)
        line = SKILL_LINE_LABEL.sub("", line, count=1)
        tokens.extend(token.strip().rstrip(".") for token in re.split(r"[,;]", line))
    return dedupe_preserving_order((token for token in tokens if token), case_sensitive=False)


def extract_skills(text: str) -> Dict[str, List[str]]:
    """
    Extract and categorize skills.

    Returns:
        Dict with the four disjoint category lists
    """
    skills: Dict[str, List[str]] = {category: [] for category in SKILL_CATEGORIES}
    for token in tokenize_skills(text):
        skills[categorize_skill(token)].append(token)
    return skills


# =============================================================================
# PROJECTS
# =============================================================================


def _new_project(line: str) -> Dict:
    urls = find_urls(line)
    name = remove_urls(line) if urls else line
    tech: List[str] = []

    # "Raytracer | C++, CUDA"
    if "|" in name:
        name, _, tech_text = name.partition("|")
        tech = [token.strip() for token in re.split(r"[,;]", tech_text) if token.strip()]

    return {
        "name": _clean_fragment(name),
        "one_liner": None,
        "bullets": [],
        "tech": tech,
        "links": make_links(urls),
    }


def extract_projects(text: str) -> List[Dict]:
    """
    Extract project entries from the projects section.

    A short unmarked line opens a project (its name; URLs move to links). Bullet
    lines become bullets; the first long unmarked line is the one-liner and any
    further long lines become bullets.
    """
    projects: List[Dict] = []

    for line in non_blank_lines(text or ""):
        if is_bullet_line(line):
            if projects:
                content = strip_bullet(line)
                if content:
                    projects[-1]["bullets"].append(content)
        elif len(line) < MAX_PROJECT_HEADER_LENGTH:
            projects.append(_new_project(line))
        elif projects:
            if projects[-1]["one_liner"] is None:
                projects[-1]["one_liner"] = line
            else:
                projects[-1]["bullets"].append(line)

    for project in projects:
        described = " ".join([project["one_liner"] or ""] + project["bullets"])
        project["tech"] = dedupe_preserving_order(
            project["tech"] + detect_technologies(described), case_sensitive=False
        )

    return [project for project in projects if project["name"]]


# =============================================================================
# PUBLICATIONS & CERTIFICATIONS
# =============================================================================


def parse_publication(line: str) -> Optional[Dict]:
    """
    Parse a "Title, Venue, Year" publication line.

    Year is the last 4-digit year on the line; venue is the text between the
    title and the year. A quoted title may contain commas.

    Example:
        >>> pub = parse_publication('"Fast BVH Builds, Revisited", SIGGRAPH, 2022')
        >>> pub["title"], pub["venue"], pub["year"]
        ('Fast BVH Builds, Revisited', 'SIGGRAPH', '2022')
    """
    urls = find_urls(line)
    line = remove_urls(line) if urls else line

    years = list(DatePatterns.YEAR.finditer(line))
    year = years[-1].group(0) if years else ""
    if years:
        line = line[: years[-1].start()] + line[years[-1].end() :]

    quoted = re.match(r'^"([^"]+)"\s*(.*)$', line.strip())
    if quoted:
        title, venue = quoted.group(1), quoted.group(2)
    else:
        title, _, venue = line.partition(",")

    title = _clean_fragment(title).strip('"').rstrip(",")
    venue = _clean_fragment(venue.lstrip(" ,.|"))
    if not title:
        return None
    return {"title": title, "venue": venue, "year": year, "links": make_links(urls)}


def extract_publications(text: str) -> List[Dict]:
    publications = []
    for line in non_blank_lines(text or ""):
        parsed = parse_publication(strip_bullet(line) if is_bullet_line(line) else line)
        if parsed:
            publications.append(parsed)
    return publications


def parse_certification(line: str) -> Optional[Dict]:
    """
    Parse a "Name, Issuer, Date" or "Name - Issuer" certification line.

    Example:
        >>> parse_certification("AWS Solutions Architect - Amazon Web Services, 2023")
        {'name': 'AWS Solutions Architect', 'issuer': 'Amazon Web Services', 'date': '2023'}
    """
    dates = list(DatePatterns.SINGLE_DATE.finditer(line))
    date = dates[-1].group(0) if dates else None
    if dates:
        line = line[: dates[-1].start()] + line[dates[-1].end() :]

    parts = [_clean_fragment(part) for part in re.split(r"\s*(?:,|\|| [-–—] )\s*", line)]
    parts = [part for part in parts if part]
    if not parts:
        return None
    return {"name": parts[0], "issuer": ", ".join(parts[1:]), "date": date}


def extract_certifications(text: str) -> List[Dict]:
    certifications = []
    for line in non_blank_lines(text or ""):
        parsed = parse_certification(strip_bullet(line) if is_bullet_line(line) else line)
        if parsed:
            certifications.append(parsed)
    return certifications
