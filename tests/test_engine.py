# tests/test_engine.py
"""
Unit tests for the placeholder substitution engine in ``svue.engine``.
"""

from pathlib import Path

import pytest

from svue.engine import TemplateEngine, TemplateLoader
from svue.exceptions import CyclicTemplateError, TemplateLookupError
from svue.registry import ObjectType, StructureType, TemplateDefinition, TemplateRegistry


def _engine(*definitions: TemplateDefinition, templates_dir: Path | None = None, on_missing = "empty") \
        -> TemplateEngine:
    return TemplateEngine(
            TemplateRegistry(definitions), TemplateLoader(templates_dir), on_missing = on_missing
            )


# ---------------------------------------------------------------------------
# substitute
# ---------------------------------------------------------------------------


def test_text_without_tokens_is_unchanged() -> None:
    engine = _engine(TemplateDefinition(name = "NAME", default = "widget"))
    text = "<div>{{ title }}</div>\n"
    assert engine.substitute(text) == text
    assert engine.substitute(engine.substitute("NAME")) == "widget"


def test_replaces_every_occurrence() -> None:
    engine = _engine(TemplateDefinition(name = "NAME", default = "Foo"))
    assert engine.substitute("class NAME extends NAME {}") == "class Foo extends Foo {}"


def test_substitution_is_transitive() -> None:
    engine = _engine(
            TemplateDefinition(name = "NAME", default = "widget.STYLE"), TemplateDefinition(name = "STYLE", default = "scss"),
            )
    result = engine.substitute("file: NAME")
    assert result == "file: widget.scss"
    assert "NAME" not in result and "STYLE" not in result


def test_chain_declared_backwards_resolves() -> None:
    """Each pass resolves one level when values refer to earlier entries."""
    engine = _engine(
            TemplateDefinition(name = "THREE", default = "done"), TemplateDefinition(name = "TWO", default = "THREE"),
            TemplateDefinition(name = "ONE", default = "TWO"), )
    assert engine.substitute("ONE") == "done"


def test_result_does_not_depend_on_token_order() -> None:
    engine = _engine(
            TemplateDefinition(name = "ALPHA", default = "a-BETA"), TemplateDefinition(name = "BETA", default = "b"), )
    assert engine.substitute("BETA ALPHA") == "b a-b"
    assert engine.substitute("ALPHA BETA") == "a-b b"


def test_literal_values_are_not_rescanned() -> None:
    engine = _engine(
            TemplateDefinition(name = "NAME"), TemplateDefinition(name = "TITLE", default = "NAME component"),
            TemplateDefinition(name = "STYLE", default = "css"), )
    engine.registry.set_value("NAME", "STYLE TITLE", literal = True)

    assert engine.substitute("TITLE / NAME") == "STYLE TITLE component / STYLE TITLE"
    assert engine.resolve("NAME") == "STYLE TITLE"


def test_literal_value_of_own_token_is_not_a_cycle() -> None:
    engine = _engine(TemplateDefinition(name = "NAME"))
    engine.registry.set_value("NAME", "NAME", literal = True)
    assert engine.substitute("class NAME {}") == "class NAME {}"


def test_cycle_raises() -> None:
    engine = _engine(
            TemplateDefinition(name = "ALPHA", default = "BETA"), TemplateDefinition(name = "BETA", default = "ALPHA"), )
    with pytest.raises(CyclicTemplateError, match = "ALPHA"):
        engine.substitute("ALPHA")


def test_self_reference_raises() -> None:
    engine = _engine(TemplateDefinition(name = "LOOP", default = "[LOOP]"))
    with pytest.raises(CyclicTemplateError):
        engine.substitute("LOOP")


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------


def test_resolve_file_template(tmp_path: Path) -> None:
    (tmp_path / "model").write_text("export default class NAME {}\n")
    engine = _engine(
            TemplateDefinition(name = "NAME", default = "User"),
            TemplateDefinition(
                    name = "MODEL_FILE", object_type = ObjectType.MODEL, structure_type = StructureType.SINGLE,
                    source_ref = "model", output_pattern = "NAME.EXT", ),
            TemplateDefinition(name = "EXT", default = "ts"), templates_dir = tmp_path, )

    assert engine.resolve("MODEL_FILE") == "export default class User {}\n"
    assert engine.registry.value("MODEL_FILE") == "export default class User {}\n"
    assert engine.render_file_name("MODEL_FILE") == "User.ts"


def test_resolve_value_placeholder() -> None:
    engine = _engine(
            TemplateDefinition(name = "TITLE", default = "NAME component"),
            TemplateDefinition(name = "NAME", default = "my-widget"), )
    assert engine.resolve("TITLE") == "my-widget component"


def test_resolve_packaged_template() -> None:
    registry = TemplateRegistry()
    registry.set_value("OBJECT_NAME", "Account")
    engine = TemplateEngine(registry)
    assert engine.resolve("INTERFACE_SINGLE") == "/* Account interface */\nexport interface Account {}\n"


def test_missing_name_resolves_empty_by_default(caplog: pytest.LogCaptureFixture) -> None:
    engine = _engine(TemplateDefinition(name = "NAME"))
    assert engine.resolve("UNKNOWN") == ""
    assert "Unknown template" in caplog.text


def test_missing_name_raises_in_error_mode() -> None:
    engine = _engine(TemplateDefinition(name = "NAME"), on_missing = "error")
    with pytest.raises(TemplateLookupError):
        engine.resolve("UNKNOWN")


@pytest.mark.parametrize(("policy", "raises"), [("empty", False), ("error", True)])
def test_missing_source_file(tmp_path: Path, policy: str, raises: bool) -> None:
    engine = _engine(
            TemplateDefinition(name = "GHOST", object_type = ObjectType.MODEL, source_ref = "ghost"),
            templates_dir = tmp_path, on_missing = policy, )
    if raises:
        with pytest.raises(TemplateLookupError, match = "ghost"):
            engine.resolve("GHOST")
    else:
        assert engine.resolve("GHOST") == ""


def test_unknown_policy_rejected() -> None:
    with pytest.raises(ValueError):
        TemplateEngine(TemplateRegistry(), on_missing = "ignore")  # type: ignore[arg-type]
