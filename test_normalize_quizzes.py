import importlib.util
import json
from pathlib import Path

import pytest

from quiz_i18n.core.exceptions import PayloadParseError, QuizValidationError

SCRIPT_PATH = Path(__file__).parent / "scripts" / "normalize_quizzes.py"
_spec = importlib.util.spec_from_file_location("normalize_quizzes", SCRIPT_PATH)
normalize_quizzes = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(normalize_quizzes)


YAML_QUIZ = """\
title: "Motion / गति"
questions:
  - text: "Unit of force? / बल की इकाई?"
    options:
      - {id: a, text: "Joule / जूल"}
      - {id: b, text: "Newton / न्यूटन"}
    correctAnswerId: b
"""


@pytest.fixture
def quiz_dir(tmp_path):
    source = tmp_path / "quizzes"
    source.mkdir()
    (source / "motion.yaml").write_text(YAML_QUIZ, encoding="utf-8")
    (source / "legacy.json").write_text(json.dumps([{"text": "Q1?", "options": ["A", "B"]}]), encoding="utf-8")
    (source / "notes.txt").write_text("not a quiz", encoding="utf-8")
    return source


def test_find_quiz_files(quiz_dir):
    files = normalize_quizzes.find_quiz_files(quiz_dir)
    assert [f.name for f in files] == ["legacy.json", "motion.yaml"]
    assert normalize_quizzes.find_quiz_files(quiz_dir / "motion.yaml") == [quiz_dir / "motion.yaml"]


def test_find_quiz_files_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        normalize_quizzes.find_quiz_files(tmp_path / "nope")


def test_load_payload_rejects_bad_json(tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(PayloadParseError) as exc_info:
        normalize_quizzes.load_payload(broken)
    assert exc_info.value.source == str(broken)


def test_normalize_file_writes_canonical_json(quiz_dir, tmp_path):
    out_dir = tmp_path / "out"
    target = normalize_quizzes.normalize_file(
        quiz_dir / "motion.yaml", out_dir, subject_id="physics", preview_language="hi"
    )

    data = json.loads(target.read_text(encoding="utf-8"))
    assert target.name == "motion.json"
    assert data["title"] == {"en": "Motion", "hi": "गति"}
    assert data["subjectId"] == "physics"
    assert data["questions"][0]["options"] == {"en": ["Joule", "Newton"], "hi": ["जूल", "न्यूटन"]}
    assert data["questions"][0]["correctIndex"] == 1
    assert data["availableLanguages"] == ["en", "hi"]
    assert data["isMultilingual"] is True

    preview = json.loads((out_dir / "motion.hi.json").read_text(encoding="utf-8"))
    assert preview["title"] == "गति"
    assert preview["questions"][0]["options"] == ["जूल", "न्यूटन"]


def test_normalize_file_strict(tmp_path):
    source = tmp_path / "empty.json"
    source.write_text(json.dumps({"title": "Empty"}), encoding="utf-8")
    with pytest.raises(QuizValidationError):
        normalize_quizzes.normalize_file(source, tmp_path / "out", strict=True)


def test_run_counts_failures(quiz_dir, tmp_path):
    (quiz_dir / "broken.json").write_text("[", encoding="utf-8")
    args = normalize_quizzes.build_parser().parse_args([str(quiz_dir), "--out", str(tmp_path / "out")])

    stats = normalize_quizzes.run(args)

    assert stats == {"normalized": 2, "failed": 1}
    assert (tmp_path / "out" / "legacy.json").exists()
    assert (tmp_path / "out" / "motion.json").exists()


def test_run_survives_unusable_answer_strings(quiz_dir, tmp_path):
    payload = {"questions": [
        {"text": "Q1?", "options": ["A", "B"], "correctAnswer": "²"},
        {"text": "Q2?", "options": ["A", "B"], "correctAnswer": "9" * 5000},
    ]}
    (quiz_dir / "odd.json").write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    args = normalize_quizzes.build_parser().parse_args([str(quiz_dir), "--out", str(tmp_path / "out")])

    stats = normalize_quizzes.run(args)

    assert stats == {"normalized": 3, "failed": 0}
    data = json.loads((tmp_path / "out" / "odd.json").read_text(encoding="utf-8"))
    assert [q["correctIndex"] for q in data["questions"]] == [0, 0]


def test_main_exit_codes(quiz_dir, tmp_path):
    assert normalize_quizzes.main([str(quiz_dir), "--out", str(tmp_path / "out")]) == 0
    assert normalize_quizzes.main([str(quiz_dir), "--out", str(tmp_path / "out"), "--strict"]) == 0

    (quiz_dir / "empty.json").write_text(json.dumps({"title": "Empty"}), encoding="utf-8")
    assert normalize_quizzes.main([str(quiz_dir), "--out", str(tmp_path / "out")]) == 0
    assert normalize_quizzes.main([str(quiz_dir), "--out", str(tmp_path / "out"), "--strict"]) == 1
    assert normalize_quizzes.main([str(tmp_path / "missing")]) == 1
