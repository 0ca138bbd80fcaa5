from pathlib import Path

import pytest

from housebuilder.plan_parser import DEFAULT_PLAN, Plan, PlanError, Run, load_plan, parse_plan


def test_parse_yaml_plan(tmp_path: Path) -> None:
    path = tmp_path / "plan.yaml"
    path.write_text(
        "builder: castle\n"
        "runs:\n"
        "  - title: Basic house\n"
        "    recipe: basic\n"
        "  - title: Custom house\n"
        "    steps: [walls, door, swimming_pool]\n",
        encoding="utf-8",
    )
    assert parse_plan(path) == Plan(
        builder="castle",
        runs=(
            Run(title="Basic house", recipe="basic"),
            Run(title="Custom house", steps=("walls", "door", "swimming_pool")),
        ),
    )


def test_markdown_frontmatter_body_is_ignored() -> None:
    text = "---\nruns:\n  - title: Full\n    recipe: full\n---\n# Notes\n\nnot: yaml: at all\n"
    plan = load_plan(text)
    assert plan.builder == "plain"
    assert plan.runs == (Run(title="Full", recipe="full"),)


def test_yaml_with_document_start_marker() -> None:
    plan = load_plan("---\nbuilder: castle\nruns:\n  - {title: A, recipe: basic}\n")
    assert plan == Plan(builder="castle", runs=(Run(title="A", recipe="basic"),))


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(PlanError, match="does not exist"):
        parse_plan(tmp_path / "missing.yaml")


def test_directory_is_not_a_plan(tmp_path: Path) -> None:
    with pytest.raises(PlanError, match="not a file"):
        parse_plan(tmp_path)


def test_undecodable_plan_file(tmp_path: Path) -> None:
    path = tmp_path / "plan.yaml"
    path.write_bytes(b"runs:\n  - title: \xff\n    recipe: basic\n")
    with pytest.raises(PlanError, match="Cannot read plan file") as exc_info:
        parse_plan(path)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("- just\n- a list\n", "mapping"),
        ("runs: []\n", "non-empty"),
        ("builder: igloo\nruns:\n  - {title: A, recipe: basic}\n", "builder"),
        ("runs:\n  - {recipe: basic}\n", "title"),
        ("runs:\n  - {title: A}\n", "exactly one"),
        ("runs:\n  - {title: A, recipe: basic, steps: [walls]}\n", "exactly one"),
        ("runs:\n  - {title: A, recipe: mansion}\n", "mansion"),
        ("runs:\n  - {title: A, steps: walls}\n", "list"),
        ("runs:\n  - {title: A, steps: [walls, moat]}\n", "moat"),
        ("runs:\n  - nope\n", "runs\\[0\\]"),
        ("runs: [\n", "valid YAML"),
    ],
)
def test_invalid_plans(text: str, message: str) -> None:
    with pytest.raises(PlanError, match=message):
        load_plan(text)


def test_default_plan_mirrors_classic_client() -> None:
    assert [r.title for r in DEFAULT_PLAN.runs] == ["Basic house", "Full house", "Custom house"]
    assert DEFAULT_PLAN.runs[2].steps == ("walls", "door", "roof", "windows", "swimming_pool")
