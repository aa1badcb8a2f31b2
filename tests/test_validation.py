"""Unit tests for static action validation."""

from ioaction import Action, Composite, WriteLine, read_line, validate_action, wrap, write_line


class TestValidateAction:
    def test_valid_primitives(self):
        assert validate_action(read_line()) == []
        assert validate_action(write_line("hi")) == []
        assert validate_action(wrap("")) == []

    def test_valid_chain(self):
        action = write_line("a").bind(lambda _: read_line()).bind(wrap)
        assert validate_action(action) == []

    def test_not_an_action(self):
        errors = validate_action("hello")
        assert errors == ["action: expected an Action, got str"]

    def test_non_string_text(self):
        errors = validate_action(WriteLine(text=42))  # type: ignore[arg-type]
        assert errors == ["action.text: expected str, got int"]

    def test_non_callable_continuation(self):
        action = Composite(first=read_line(), next="oops")  # type: ignore[arg-type]
        errors = validate_action(action)
        assert errors == ["action.next: continuation must be callable"]

    def test_error_path_follows_first_links(self):
        action = Composite(first=WriteLine(text=None), next=wrap).bind(wrap)  # type: ignore[arg-type]
        errors = validate_action(action)
        assert errors == ["action.first.first.text: expected str, got NoneType"]

    def test_non_action_first_link(self):
        action = Composite(first=3, next=wrap)  # type: ignore[arg-type]
        errors = validate_action(action)
        assert errors == ["action.first: expected an Action, got int"]

    def test_bare_base_action_is_unknown(self):
        errors = validate_action(Action())
        assert len(errors) == 1
        assert "unknown action kind" in errors[0]

    def test_continuation_results_are_not_inspected(self):
        action = read_line().bind(lambda _: "not an action")  # type: ignore[arg-type,return-value]
        assert validate_action(action) == []

    def test_deep_chain(self):
        action = read_line()
        for _ in range(5_000):
            action = action.bind(wrap)
        assert validate_action(action) == []
