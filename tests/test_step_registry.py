from enum import Enum

import pytest

from motivation import (
    EMPTY_DEFINITION,
    ProgressionBuilder,
    StepDefinition,
    StepDefinitionError,
    StepKind,
    StepRegistry,
)


def _always(m):
    return True


def test_check_without_any_step_name_fails_at_declaration():
    builder = ProgressionBuilder()

    with pytest.raises(StepDefinitionError, match="No step name"):
        builder.check(_always)
    with pytest.raises(StepDefinitionError, match="No step name"):
        builder.check()

    assert builder.build().registry.checks == ()


def test_completion_requires_current_step_name():
    builder = ProgressionBuilder()

    with pytest.raises(StepDefinitionError, match="No step name"):
        builder.completion(_always)


def test_completion_does_not_accept_explicit_name():
    builder = ProgressionBuilder().step("signed_up")

    with pytest.raises(StepDefinitionError):
        builder.completion("signed_up")


def test_explicit_check_name_becomes_current_step_when_unset():
    builder = ProgressionBuilder()
    builder.check("name_setup", _always)
    builder.check("local_method_step", _always)
    builder.completion(_always)

    registry = builder.build().registry
    assert builder.current_step_name == "name_setup"
    assert registry.completion_names == ("name_setup",)


def test_step_changes_current_step_name():
    builder = ProgressionBuilder()
    builder.step("subdomain_setup").check(_always)
    builder.step("users_signed_up").check(_always)
    builder.completion(_always)

    registry = builder.build().registry
    assert registry.check_names == ("subdomain_setup", "users_signed_up")
    assert registry.completion_names == ("users_signed_up",)


def test_decorator_forms_register_and_return_function():
    builder = ProgressionBuilder().step("ready")

    @builder.check
    def ready(m):
        return True

    @builder.completion
    def mark_ready(m):
        return "marked"

    @builder.check("named")
    def named(m):
        return False

    @builder.applies
    def applies(m):
        return False

    definition = builder.build()
    assert ready(None) is True
    assert definition.registry.find_check("ready").action is ready
    assert definition.registry.find_check("named").action is named
    assert definition.registry.find_completion("ready").run(None) == "marked"
    assert definition.applies is applies


def test_duplicate_check_names_are_rejected():
    builder = ProgressionBuilder()
    builder.check("ready", _always)

    with pytest.raises(StepDefinitionError, match="Duplicate check"):
        builder.check("ready", _always)


def test_check_and_completion_may_share_a_name():
    builder = ProgressionBuilder().step("ready")
    builder.check(_always)
    builder.completion(_always)

    registry = builder.build().registry
    assert registry.find_check("ready").kind is StepKind.CHECK
    assert registry.find_completion("ready").kind is StepKind.COMPLETION


def test_build_returns_independent_snapshots():
    builder = ProgressionBuilder()
    builder.check("first", _always)
    before = builder.build()
    builder.check("second", _always)
    after = builder.build()

    assert before.registry.check_names == ("first",)
    assert after.registry.check_names == ("first", "second")


def test_subject_alias_validation():
    builder = ProgressionBuilder()

    for alias in ("", "not-valid", "subject"):
        with pytest.raises(StepDefinitionError):
            builder.subject_alias(alias)

    builder.subject_alias("project").subject_alias("project")
    assert builder.build().subject_aliases == ("project",)


def test_step_definition_requires_name():
    with pytest.raises(StepDefinitionError, match="No step name"):
        StepDefinition("", _always)
    with pytest.raises(StepDefinitionError, match="No step name"):
        StepDefinition(None, _always)


def test_step_definition_runs_action_with_context():
    seen = []
    step = StepDefinition("ready", lambda context: seen.append(context) or "ok")

    assert step.run("context") == "ok"
    assert seen == ["context"]
    assert step.is_check and not step.is_completion


def test_step_registry_lookup_and_validation():
    check = StepDefinition("ready", _always)
    registry = StepRegistry(check_steps=[check])

    assert registry.checks == (check,)
    assert len(registry) == 1
    assert registry.find_check("ready") is check
    assert registry.find_check("missing") is None
    assert registry.find_completion("ready") is None

    with pytest.raises(StepDefinitionError):
        StepRegistry(completion_steps=(check,))
    with pytest.raises(StepDefinitionError, match="Duplicate"):
        StepRegistry(check_steps=(check, StepDefinition("ready", _always)))


def test_empty_definition_has_no_steps():
    assert EMPTY_DEFINITION.registry.checks == ()
    assert EMPTY_DEFINITION.applies is None
    assert EMPTY_DEFINITION.subject_aliases == ()


def test_explicit_empty_check_name_is_rejected():
    builder = ProgressionBuilder().step("current")

    with pytest.raises(StepDefinitionError, match="No step name"):
        builder.check("", _always)

    assert builder.build().registry.check_names == ()


def test_unapplied_check_decorator_does_not_set_current_step():
    builder = ProgressionBuilder()
    builder.check("pending")

    assert builder.current_step_name is None
    with pytest.raises(StepDefinitionError, match="No step name"):
        builder.completion(_always)

    builder.check("pending")(_always)
    assert builder.current_step_name == "pending"


def test_step_definition_requires_string_name():
    class Steps(Enum):
        READY = "ready"

    with pytest.raises(StepDefinitionError, match="must be a string"):
        StepDefinition(Steps.READY, _always)
