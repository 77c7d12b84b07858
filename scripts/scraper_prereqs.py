"""
Scrape prerequisite text for every course in course-links.json.

Input:  data/course-data/course-links.json   {"MATH 237": "https://..."}
Output: data/course-data/prereqs.json
        {"MATH 237": {"prereq_text", "prereq_codes", "scraped_at", "source"}}

Courses already in prereqs.json are skipped, so an interrupted run can be
restarted. Progress is checkpointed every 10 courses.

Usage:
    python scripts/scraper_prereqs.py
"""

import json
import os
import time
from datetime import datetime, timezone

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ontrack.config import (
    COURSE_DATA_DIR,
    COURSE_LINKS_FILENAME,
    PREREQS_FILENAME,
    SCRAPER_USER_AGENT,
    SCRAPER_TIMEOUT,
)
from ontrack.data import extract_course_codes
from ontrack.models import normalize_code

# --- CONFIGURATION ---
LINKS_FILE = COURSE_DATA_DIR / COURSE_LINKS_FILENAME
OUTPUT_FILE = COURSE_DATA_DIR / PREREQS_FILENAME

CHECKPOINT_EVERY = 10
POLITE_DELAY = 0.3  # seconds between pages
# ---------------------


# --- SESSION SETUP ---
def create_retry_session():
    session = requests.Session()
    retries = Retry(
        total=5,
        backoff_factor=2,  # Wait 2s, 4s, 8s... on 429/5xx
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"]
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers.update({"User-Agent": SCRAPER_USER_AGENT})
    return session


def read_json_safe(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError):
        return {}


def write_json(path, obj):
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(obj, f, indent=2)


def extract_prereq_text(html):
    """
    Find the "Prerequisites" section of a course page.

    Looks for a heading containing "Prerequisites" and takes the element
    right after it; falls back to the first block mentioning the word.
    Text after "Corequisites"/"Antirequisites" is cut off.
    """
    soup = BeautifulSoup(html, "html.parser")
    text = ""

    heading = soup.find(
        lambda tag: tag.name in ("h2", "h3", "h4", "strong") and "Prerequisites" in tag.get_text()
    )
    if heading is not None:
        sibling = heading.find_next_sibling()
        if sibling is not None:
            text = sibling.get_text(" ", strip=True)

    if not text:
        block = soup.find(lambda tag: tag.name in ("div", "p", "section")
                          and "Prerequisites" in tag.get_text()
                          and not tag.find(["div", "section"]))
        if block is not None:
            text = block.get_text(" ", strip=True)

    return text.split("Corequisites")[0].split("Antirequisites")[0].strip()


def scrape_one(session, code, url):
    resp = session.get(url, timeout=SCRAPER_TIMEOUT)
    resp.raise_for_status()

    prereq_text = extract_prereq_text(resp.text)
    return {
        "prereq_text": prereq_text,
        "prereq_codes": extract_course_codes(prereq_text, exclude=code),
        "scraped_at": datetime.now(timezone.utc).isoformat(),
        "source": url,
    }


def run():
    links = read_json_safe(LINKS_FILE)
    existing = read_json_safe(OUTPUT_FILE)
    codes = list(links.keys())

    if not codes:
        print(f"❌ No course links found in {LINKS_FILE}")
        return

    print(f"🔎 Found {len(codes)} courses in course-links.json")
    print(f"📂 {len(existing)} already scraped in prereqs.json")

    session = create_retry_session()

    for i, raw_code in enumerate(codes, 1):
        code = normalize_code(raw_code)
        if code in existing:
            continue

        print(f"[{i}/{len(codes)}] {code}...", end=" ", flush=True)
        try:
            existing[code] = scrape_one(session, code, links[raw_code])
            print(f"✅ {len(existing[code]['prereq_codes'])} prereq code(s)")
        except requests.RequestException as e:
            print(f"❌ {e}")

        if i % CHECKPOINT_EVERY == 0:
            write_json(OUTPUT_FILE, existing)
            print(f"  … checkpoint saved ({i} done)")

        time.sleep(POLITE_DELAY)

    write_json(OUTPUT_FILE, existing)
    print(f"✨ Finished. Saved {len(existing)} courses → {OUTPUT_FILE}")


if __name__ == "__main__":
    run()
