"""
Convert the course offerings CSV export into courses.json.

Input:  CSV with "code"/"title" or "Course code"/"Course title" columns
Output: JSON list of {code, title}

Usage:
    python scripts/processor_catalog.py [input.csv] [output.json]
"""

import csv
import json
import os
import sys

# --- CONFIGURATION ---
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
INPUT_FILE = os.path.join(BASE_DIR, "data", "course-data", "course offerings.csv")
OUTPUT_FILE = os.path.join(BASE_DIR, "data", "course-data", "courses.json")
# ---------------------


def read_row(row):
    """Returns (code, title) or None if the row is incomplete."""
    code = (row.get("code") or row.get("Course code") or "").strip()
    title = (row.get("title") or row.get("Course title") or "").strip()
    if code and title:
        return code, title
    return None


def convert(input_path, output_path):
    courses = []
    with open(input_path, "r", encoding="utf-8", newline="") as f:
        for row in csv.DictReader(f):
            parsed = read_row(row)
            if parsed:
                courses.append({"code": parsed[0], "title": parsed[1]})

    os.makedirs(os.path.dirname(os.path.abspath(output_path)), exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(courses, f, indent=2)
    return courses


def run():
    input_path = sys.argv[1] if len(sys.argv) > 1 else INPUT_FILE
    output_path = sys.argv[2] if len(sys.argv) > 2 else OUTPUT_FILE

    if not os.path.exists(input_path):
        print(f"❌ Input file not found: {input_path}")
        sys.exit(1)

    courses = convert(input_path, output_path)
    print(f"✅ Converted {len(courses)} courses → {output_path}")


if __name__ == "__main__":
    run()
