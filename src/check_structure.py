"""CLARIFICATION_REQUEST.md 구조 검사.

필수 섹션 이름 6개가 문서 본문 어딘가에 (대소문자 구분) 그대로 들어 있는지만 본다.
Markdown 헤딩 여부나 순서, 섹션 내용은 검사하지 않는다.

    python src/check_structure.py
"""
import json
import os
from typing import NamedTuple, Optional, Sequence

from check_config import load_config, report_config
from check_timeutil import iso_stamp
from check_utils import log_error

DOCUMENT_PATH = "CLARIFICATION_REQUEST.md"

# 검사 순서 = 보고 순서 (처음 누락된 것 하나만 보고)
REQUIRED_SECTIONS = (
    "Title",
    "Background",
    "Observed Ambiguity",
    "Specific Clarification Questions",
    "Risk of Proceeding Without Clarification",
    "Suggested Documentation Improvements",
)

PASS_MESSAGE = "Structure validation passed"


class FileAccessError(Exception):
    """문서를 열거나 UTF-8로 디코딩할 수 없음."""


class MissingSectionError(Exception):

    def __init__(self, section: str):
        super().__init__(f"Missing section: {section}")
        self.section = section


class Outcome(NamedTuple):
    missing: Optional[str] = None
    document: str = DOCUMENT_PATH

    @classmethod
    def success(cls, document: str = DOCUMENT_PATH) -> "Outcome":
        return cls(None, document)

    @classmethod
    def failure(cls, section: str, document: str = DOCUMENT_PATH) -> "Outcome":
        return cls(section, document)

    @property
    def passed(self) -> bool:
        return self.missing is None

    @property
    def message(self) -> str:
        if self.passed:
            return PASS_MESSAGE
        return f"Missing section: {self.missing}"

    def raise_for_missing(self) -> None:
        if not self.passed:
            raise MissingSectionError(self.missing)


def read_document(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(f"Cannot read {path}: {e}") from e


def find_missing(text: str, sections: Sequence[str] = REQUIRED_SECTIONS) -> Optional[str]:
    """처음으로 빠진 섹션 이름을 반환. 모두 있으면 None."""
    for name in sections:
        if name not in text:
            return name
    return None


def validate(path: str = DOCUMENT_PATH, sections: Sequence[str] = REQUIRED_SECTIONS) -> Outcome:
    """문서를 한 번 읽고 필수 섹션을 순서대로 확인한다.

    읽기/디코딩 실패는 FileAccessError로 그대로 올라가며, 이 경우 섹션 검사는
    수행되지 않는다. 섹션 누락은 예외가 아니라 Outcome.failure로 돌려준다.
    """
    text = read_document(path)
    missing = find_missing(text, sections)
    if missing is None:
        return Outcome.success(path)
    return Outcome.failure(missing, path)


def require(path: str = DOCUMENT_PATH, sections: Sequence[str] = REQUIRED_SECTIONS) -> Outcome:
    """validate + raise_for_missing. 누락 시 MissingSectionError."""
    outcome = validate(path, sections)
    outcome.raise_for_missing()
    return outcome


def write_report(report_path: str, document: str, missing: Optional[str] = None,
                 error: Optional[str] = None, tz_name: Optional[str] = None) -> dict:
    rec = {
        "document": document,
        "passed": missing is None and error is None,
        "missing": missing,
        "checked_at": iso_stamp(tz_name=tz_name),
    }
    if error is not None:
        rec["error"] = error

    parent = os.path.dirname(report_path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(report_path, "w", encoding="utf-8") as f:
        json.dump(rec, f, ensure_ascii=False, indent=2)
    return rec


def save_report(report_path: Optional[str], document: str, **kw) -> Optional[dict]:
    # 리포트는 부가 기록: 저장 실패가 검사 결과/출력을 바꾸지 않음
    if not report_path:
        return None
    try:
        return write_report(report_path, document, **kw)
    except OSError:
        return None


def main() -> int:
    cfg = load_config()
    report_path = report_config(cfg).get("path")
    tz_name = cfg.get("timezone")

    try:
        outcome = validate()
    except FileAccessError as e:
        save_report(report_path, DOCUMENT_PATH, error=str(e), tz_name=tz_name)
        log_error(str(e))
        return 1

    save_report(report_path, outcome.document, missing=outcome.missing, tz_name=tz_name)

    if not outcome.passed:
        log_error(outcome.message)
        return 1

    print(outcome.message)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
