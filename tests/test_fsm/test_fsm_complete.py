"""
Testes do módulo FSM do formulário de anúncio.

Cobrem estados, grafo de transições, guards e a máquina de estados.
"""

from datetime import datetime

import pytest

import fsm.manager.machine as machine_module
from fsm import (
    BUSY_STATES,
    DEFAULT_INITIAL_STATE,
    INITIAL_STATES,
    TERMINAL_STATES,
    VALID_TRANSITIONS,
    DraftState,
    DraftStateMachine,
    GuardResult,
    StateTransition,
    TransitionResult,
    create_fsm,
    evaluate_guards,
    get_valid_targets,
    is_busy,
    is_terminal,
    is_transition_valid,
    is_valid_state,
    validate_transition_map,
)
from fsm.rules.guards import guard_same_state, guard_terminal_state, guard_valid_state


class TestDraftStates:
    def test_enum_has_seven_states_and_only_disposed_is_terminal(self) -> None:
        assert len(list(DraftState)) == 7
        assert TERMINAL_STATES == frozenset({DraftState.DISPOSED})

        for state in DraftState:
            assert is_terminal(state) is (state is DraftState.DISPOSED)
            assert is_valid_state(state) is True

        assert DEFAULT_INITIAL_STATE == DraftState.IDLE
        assert INITIAL_STATES == frozenset({DraftState.IDLE})

    def test_state_values_are_explicit_strings(self) -> None:
        for state in DraftState:
            assert state.value == state.name
            assert str(state) == state.name

    def test_busy_states_are_the_network_states(self) -> None:
        assert BUSY_STATES == {DraftState.LOADING, DraftState.SAVING, DraftState.SYNCING_IMAGES}
        assert is_busy(DraftState.SAVING) is True
        assert is_busy(DraftState.EDITING) is False


class TestTransitionGraph:
    def test_transition_map_is_consistent(self) -> None:
        assert validate_transition_map() == []
        assert set(VALID_TRANSITIONS) == set(DraftState)
        assert VALID_TRANSITIONS[DraftState.DISPOSED] == frozenset()

    def test_every_non_terminal_state_can_be_disposed(self) -> None:
        for state in DraftState:
            if state is DraftState.DISPOSED:
                continue
            assert is_transition_valid(state, DraftState.DISPOSED) is True

    @pytest.mark.parametrize(
        ("from_state", "to_state", "expected"),
        [
            (DraftState.IDLE, DraftState.LOADING, True),
            (DraftState.IDLE, DraftState.EDITING, True),
            (DraftState.IDLE, DraftState.SAVING, False),
            (DraftState.EDITING, DraftState.SAVING, True),
            (DraftState.SAVING, DraftState.SYNCING_IMAGES, True),
            (DraftState.SAVING, DraftState.CLOSED, False),
            (DraftState.SYNCING_IMAGES, DraftState.EDITING, True),
            (DraftState.SYNCING_IMAGES, DraftState.SAVING, False),
            (DraftState.CLOSED, DraftState.LOADING, True),
            (DraftState.DISPOSED, DraftState.EDITING, False),
        ],
    )
    def test_is_transition_valid(
        self, from_state: DraftState, to_state: DraftState, expected: bool
    ) -> None:
        assert is_transition_valid(from_state, to_state) is expected

    def test_get_valid_targets_of_terminal_is_empty(self) -> None:
        assert get_valid_targets(DraftState.DISPOSED) == frozenset()
        assert DraftState.SAVING in get_valid_targets(DraftState.EDITING)


class TestGuards:
    def test_guard_result_factories(self) -> None:
        assert GuardResult.allow().allowed is True
        denied = GuardResult.deny("motivo")
        assert denied.allowed is False
        assert denied.reason == "motivo"

    def test_same_state_guard_only_allows_reloading(self) -> None:
        assert guard_same_state(DraftState.LOADING, DraftState.LOADING).allowed is True
        assert guard_same_state(DraftState.EDITING, DraftState.EDITING).allowed is False

    def test_terminal_and_invalid_state_guards(self) -> None:
        assert guard_terminal_state(DraftState.DISPOSED, DraftState.EDITING).allowed is False
        assert guard_valid_state("EDITING", DraftState.SAVING).allowed is False  # type: ignore[arg-type]
        assert evaluate_guards(DraftState.EDITING, DraftState.SAVING).allowed is True


class TestDraftStateMachine:
    def test_full_save_cycle_records_history(self) -> None:
        machine = create_fsm("draft-1")

        for target, trigger in [
            (DraftState.LOADING, "initialize"),
            (DraftState.EDITING, "initialize"),
            (DraftState.SAVING, "submit"),
            (DraftState.SYNCING_IMAGES, "sync_images"),
            (DraftState.EDITING, "saved"),
        ]:
            result = machine.transition(target, trigger)
            assert result.success is True

        assert machine.current_state == DraftState.EDITING
        assert [t.trigger for t in machine.history] == [
            "initialize",
            "initialize",
            "submit",
            "sync_images",
            "saved",
        ]
        summary = machine.get_state_summary()
        assert summary["draft_id"] == "draft-1"
        assert summary["transition_count"] == 5
        assert "SAVING" in summary["valid_targets"]
        history = machine.get_history_summary()
        assert history[2]["from_state"] == "EDITING"
        assert history[2]["to_state"] == "SAVING"

    def test_reloading_while_loading_is_allowed(self) -> None:
        machine = DraftStateMachine(initial_state=DraftState.LOADING, draft_id="d")
        assert machine.transition(DraftState.LOADING, "initialize").success is True

    def test_invalid_transition_keeps_state(self) -> None:
        machine = create_fsm("d")
        result = machine.transition(DraftState.SAVING, "submit")

        assert result.success is False
        assert "IDLE → SAVING" in (result.error_reason or "")
        assert machine.current_state == DraftState.IDLE
        assert machine.history == []

    def test_disposed_machine_accepts_nothing(self) -> None:
        machine = create_fsm("d")
        machine.transition(DraftState.DISPOSED, "dispose")

        assert machine.is_terminal is True
        assert machine.can_transition_to(DraftState.EDITING) is False
        assert machine.transition(DraftState.EDITING, "initialize").success is False

    def test_guard_denial_blocks_valid_transition(self, monkeypatch) -> None:
        def _deny_guard(from_state: DraftState, to_state: DraftState) -> GuardResult:
            del from_state, to_state
            return GuardResult.deny("blocked_by_guard")

        monkeypatch.setattr(machine_module, "evaluate_guards", _deny_guard)

        machine = DraftStateMachine(initial_state=DraftState.EDITING, draft_id="d")
        result = machine.transition(DraftState.SAVING, "submit")

        assert result.success is False
        assert result.error_reason == "blocked_by_guard"
        assert machine.current_state == DraftState.EDITING


class TestTransitionTypes:
    def test_state_transition_log_dict(self) -> None:
        transition = StateTransition(
            from_state=DraftState.EDITING,
            to_state=DraftState.SAVING,
            trigger="submit",
            metadata={"steps": 3},
        )
        log = transition.to_log_dict()

        assert log["from_state"] == "EDITING"
        assert log["to_state"] == "SAVING"
        assert log["metadata"] == {"steps": 3}
        assert isinstance(transition.timestamp, datetime)

    def test_state_transition_requires_trigger(self) -> None:
        with pytest.raises(ValueError):
            StateTransition(DraftState.IDLE, DraftState.EDITING, trigger="  ")

    def test_transition_result_invariants(self) -> None:
        with pytest.raises(ValueError):
            TransitionResult(success=True)
        with pytest.raises(ValueError):
            TransitionResult(success=False)
