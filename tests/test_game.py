from __future__ import annotations

import random

import pytest

from gofish.engine.actions import COMPUTER, PLAYER, AskAction, PassAction
from gofish.engine.ai import ai_take_turn, choose_rank
from gofish.engine.match import (
    AWAITING_COMPUTER,
    AWAITING_PLAYER,
    GameConfig,
    GameState,
    check_for_books,
    fresh_seed,
    new_game,
    step,
    take_turn,
    total_cards,
)
from gofish.engine.types import RANKS, Card


def test_new_game_deals_seven_each() -> None:
    state = new_game(seed=11)
    assert len(state.player.hand) == 7
    assert len(state.computer.hand) == 7
    assert len(state.draw_pile) == 38
    assert state.player.books == []
    assert state.computer.books == []
    assert state.phase == AWAITING_PLAYER
    assert total_cards(state) == 52
    all_cards = state.player.hand + state.computer.hand + state.draw_pile
    assert len(set(all_cards)) == 52


def test_new_game_is_deterministic_for_a_seed() -> None:
    a = new_game(seed=5)
    b = new_game(seed=5)
    assert a.player.hand == b.player.hand
    assert a.computer.hand == b.computer.hand
    assert a.draw_pile == b.draw_pile


def test_config_seed_and_hand_size() -> None:
    state = new_game(config=GameConfig(hand_size=5, seed=3))
    assert state.seed == 3
    assert len(state.player.hand) == 5
    assert len(state.draw_pile) == 42


def test_impossible_hand_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        new_game(seed=1, config=GameConfig(hand_size=27))


def test_player_ask_moves_phase_to_computer() -> None:
    state = new_game(seed=21)
    rank = state.player.hand[0].rank
    res = step(state, AskAction.by_player(rank))
    assert res.ok
    assert res.outcome is not None
    assert state.phase == AWAITING_COMPUTER
    assert res.events[0] == {"type": "ASK", "player": PLAYER, "rank": rank}


def test_player_cannot_ask_twice_before_reply() -> None:
    state = new_game(seed=21)
    step(state, AskAction.by_player("7"))
    hand_before = list(state.player.hand)
    pile_before = list(state.draw_pile)

    res = step(state, AskAction.by_player("7"))

    assert not res.ok
    assert res.error == "Wait for the computer to reply."
    assert state.player.hand == hand_before
    assert state.draw_pile == pile_before


def test_computer_cannot_ask_out_of_turn() -> None:
    state = new_game(seed=21)
    res = step(state, AskAction.by_computer("7"))
    assert not res.ok
    assert state.phase == AWAITING_PLAYER


def test_computer_turn_message_and_phase() -> None:
    state = new_game(seed=8)
    step(state, AskAction.by_player("Joker"))
    res = ai_take_turn(state)
    assert res.ok
    assert res.message.startswith("Computer asks for: ")
    assert state.phase == AWAITING_PLAYER


def test_choose_rank_comes_from_computer_hand() -> None:
    state = new_game(seed=13)
    held = {c.rank for c in state.computer.hand}
    for _ in range(50):
        assert choose_rank(state) in held


def test_choose_rank_is_uniform_over_distinct_ranks() -> None:
    state = new_game(seed=1)
    state.computer.hand = [
        Card(rank="2", suit="Hearts"),
        Card(rank="2", suit="Clubs"),
        Card(rank="2", suit="Spades"),
        Card(rank="King", suit="Hearts"),
    ]
    state.rng = random.Random(4)
    picks = [choose_rank(state) for _ in range(2000)]
    # Three 2s should not make "2" three times as likely
    assert 800 < picks.count("King") < 1200


def test_computer_with_empty_hand_passes() -> None:
    state = new_game(seed=2)
    step(state, AskAction.by_player("Joker"))
    state.draw_pile.extend(state.computer.hand)
    state.computer.hand.clear()

    res = ai_take_turn(state)

    assert res.ok
    assert res.message == "Computer has no cards and passes."
    assert res.events == [{"type": "TURN_SKIPPED", "player": COMPUTER, "reason": "empty_hand"}]
    assert state.phase == AWAITING_PLAYER
    assert total_cards(state) == 52


def test_pass_with_cards_is_rejected() -> None:
    state = new_game(seed=2)
    res = step(state, PassAction(player=PLAYER))
    assert not res.ok
    assert state.phase == AWAITING_PLAYER


def test_card_total_holds_through_random_play() -> None:
    rng = random.Random(2024)
    for seed in range(10):
        state = new_game(seed=seed)
        for _ in range(60):
            rank = rng.choice(RANKS)
            assert step(state, AskAction.by_player(rank)).ok
            assert total_cards(state) == 52
            assert ai_take_turn(state).ok
            assert total_cards(state) == 52
            for ps in state.players:
                assert len(ps.books) == len(set(ps.books))


def _arrange(state: GameState, player: list[Card], computer: list[Card]) -> None:
    everything = state.player.hand + state.computer.hand + state.draw_pile
    chosen = set(player) | set(computer)
    state.player.hand[:] = player
    state.computer.hand[:] = computer
    state.draw_pile[:] = [c for c in everything if c not in chosen]


def test_book_completed_across_both_hands() -> None:
    state = new_game(seed=42)
    _arrange(
        state,
        player=[Card("9", "Hearts"), Card("9", "Diamonds"), Card("2", "Hearts"), Card("3", "Hearts")],
        computer=[Card("9", "Clubs"), Card("9", "Spades"), Card("4", "Hearts")],
    )
    assert total_cards(state) == 52

    res = step(state, AskAction.by_player("9"))

    assert res.ok
    assert res.message == "2 card(s) collected!"
    assert state.player.books == ["9"]
    assert state.player.hand == [Card("2", "Hearts"), Card("3", "Hearts")]
    assert state.computer.hand == [Card("4", "Hearts")]
    assert {"type": "BOOK_COMPLETED", "player": PLAYER, "rank": "9"} in res.events
    assert total_cards(state) == 52


def test_functions_compose_like_the_session() -> None:
    state = new_game(seed=42)
    _arrange(
        state,
        player=[Card("9", "Hearts"), Card("9", "Diamonds"), Card("9", "Clubs"), Card("King", "Hearts")],
        computer=[Card("9", "Spades"), Card("4", "Hearts")],
    )

    take_turn(state.player.hand, state.computer.hand, "9", state.draw_pile)
    state.player.hand = check_for_books(state.player.hand, state.player.books)

    assert state.player.books == ["9"]
    assert state.player.hand == [Card("King", "Hearts")]
    assert total_cards(state) == 52


def test_explicit_seed_beats_config_seed() -> None:
    pinned = GameConfig(seed=5)
    a = new_game(config=pinned)
    b = new_game(config=pinned)
    assert a.seed == b.seed == 5
    assert a.player.hand == b.player.hand

    c = new_game(seed=6, config=pinned)
    assert c.seed == 6
    assert c.player.hand == new_game(seed=6).player.hand
    assert c.player.hand != a.player.hand


def test_fresh_seeds_deal_new_games_despite_config_seed() -> None:
    pinned = GameConfig(seed=5)
    deals = {tuple(new_game(seed=fresh_seed(), config=pinned).player.hand) for _ in range(5)}
    assert len(deals) > 1
