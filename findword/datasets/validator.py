"""
Dictionary validator for findword.

What this module does:
- Check a word list file (one word per line) against the format the matcher
  expects: lowercase a–z only, no blank lines.
- Count valid, unique and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Invalid lines are not fatal for a search (the matcher skips them); this report
just makes them visible.

Typical use:
    from findword.datasets import validate_dictionary, pretty_summary
    rep = validate_dictionary("words.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from findword.engine.matcher import is_word


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    dictionary: FileReport
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file and validate them.

    Rules:
      - one token per line
      - must be lowercase a–z
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8", errors="replace") as f:
        for raw in f:
            w = raw.strip()
            if is_word(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_dictionary(path: str) -> Dict:
    """
    Validate a dictionary file.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with
        counts, SHA-256, a `passed` boolean (non-empty, no invalid lines) and
        `issues` to surface any problems.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.is_file():
        issues.append(f"dictionary not found: {path}")
        rep = ValidationReport(
            dictionary=FileReport(path, False, 0, "", 0, 0),
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    words, invalid = _load_and_check(p)
    report = FileReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if report.count == 0:
        issues.append("dictionary contains 0 valid words")
    if invalid:
        issues.append(f"dictionary has {invalid} invalid line(s)")
    if report.count != report.unique_count:
        issues.append("dictionary contains duplicate lines")

    rep = ValidationReport(
        dictionary=report,
        passed=report.count > 0 and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        dictionary=words.txt | words=172820 (uniq=172820, invalid=0, sha=abc123...) | OK
    """
    d = report["dictionary"]
    status = "OK" if report["passed"] else "FAIL"
    sha = (d.get("sha256") or "")[:12]
    return (
        f"dictionary={d['path']} | words={d['count']} (uniq={d['unique_count']}, "
        f"invalid={d['invalid_lines']}, sha={sha}) | {status}"
    )
