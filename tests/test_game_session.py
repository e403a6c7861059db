import logging

from numclass_app.core.models import ClassificationResults, GamePhase, LeaderboardEntry

from conftest import FIXED_NOW, ManualTicker, make_session


def start(session, name="Ada"):
    assert session.set_player_name(name)
    assert session.start_game()


def assert_partition(session):
    numbers = [q.number for q in session.selected_questions]
    held = list(session.pool)
    for items in session.assignments.values():
        held.extend(items)
    assert sorted(held) == sorted(numbers)


def test_new_session_starts_in_start_phase(session):
    assert session.phase is GamePhase.START
    assert session.player_name == ""
    assert session.pool == []
    assert session.results is None
    assert session.score == 0
    assert session.leaderboard == []


def test_start_requires_non_blank_name(session, ticker):
    assert session.start_game() is False
    session.set_player_name("   ")
    assert session.start_game() is False
    assert session.phase is GamePhase.START
    assert ticker.start_count == 0


def test_start_draws_twenty_distinct_numbers(session, ticker):
    start(session)
    numbers = [q.number for q in session.selected_questions]
    assert session.phase is GamePhase.PLAYING
    assert len(numbers) == 20
    assert len(set(numbers)) == 20
    assert session.pool == numbers
    assert session.assignments == {}
    assert session.elapsed_seconds == 0
    assert ticker.is_running


def test_small_bank_deals_whole_bank(small_session):
    start(small_session)
    assert sorted(small_session.pool) == sorted(["2i", "π", "-√36"])


def test_name_can_only_change_on_start_screen(session):
    start(session)
    assert session.set_player_name("Grace") is False
    assert session.player_name == "Ada"


def test_instructions_round_trip(session):
    assert session.go_to_instructions() is False
    session.set_player_name("Ada")
    assert session.go_to_instructions()
    assert session.phase is GamePhase.INSTRUCTIONS
    assert session.dismiss_instructions()
    assert session.phase is GamePhase.START
    assert session.dismiss_instructions() is False


def test_start_from_instructions(session):
    session.set_player_name("Ada")
    session.go_to_instructions()
    assert session.start_game()
    assert session.phase is GamePhase.PLAYING


def test_select_and_place(small_session):
    start(small_session)
    assert small_session.select_number("2i")
    assert small_session.selected_number == "2i"
    assert small_session.place_in_category("imaginary")
    assert small_session.selected_number is None
    assert small_session.bucket("imaginary") == ["2i"]
    assert "2i" not in small_session.pool
    assert small_session.classified_count == 1
    assert_partition(small_session)


def test_selecting_same_number_twice_matches_single_select(small_session, small_bank, registry, leaderboard_store):
    once = make_session(small_bank, registry, leaderboard_store, ManualTicker())
    start(once)
    start(small_session)

    assert once.select_number("π")
    assert small_session.select_number("π")
    assert small_session.select_number("π")

    assert small_session.selected_number == once.selected_number == "π"
    assert small_session.pool == once.pool
    assert small_session.assignments == once.assignments

    assert small_session.place_in_category("irrational")
    assert small_session.bucket("irrational") == ["π"]
    assert "π" not in small_session.pool
    assert small_session.classified_count == 1
    assert small_session.place_in_category("irrational") is False
    assert small_session.bucket("irrational") == ["π"]
    assert_partition(small_session)


def test_place_without_selection_is_ignored(small_session):
    start(small_session)
    pool_before = small_session.pool
    assert small_session.place_in_category("imaginary") is False
    assert small_session.pool == pool_before


def test_select_unknown_number_is_ignored(small_session):
    start(small_session)
    assert small_session.select_number("42") is False
    assert small_session.selected_number is None


def test_place_in_unknown_category_keeps_selection(small_session):
    start(small_session)
    small_session.select_number("π")
    assert small_session.place_in_category("prime") is False
    assert small_session.selected_number == "π"
    assert "π" in small_session.pool


def test_placed_number_can_move_to_another_category(small_session):
    start(small_session)
    small_session.select_number("π")
    small_session.place_in_category("rational")
    small_session.select_number("π")
    small_session.place_in_category("irrational")
    assert small_session.bucket("rational") == []
    assert small_session.bucket("irrational") == ["π"]
    assert_partition(small_session)


def test_remove_returns_number_to_pool(small_session):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    assert small_session.remove_from_category("2i", "imaginary")
    assert small_session.pool[-1] == "2i"
    assert small_session.bucket("imaginary") == []
    assert_partition(small_session)


def test_remove_from_wrong_category_is_ignored(small_session):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    assert small_session.remove_from_category("2i", "complex") is False
    assert small_session.remove_from_category("2i", "nope") is False
    assert small_session.bucket("imaginary") == ["2i"]


def test_remove_clears_matching_selection(small_session):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    small_session.select_number("2i")
    small_session.remove_from_category("2i", "imaginary")
    assert small_session.selected_number is None


def test_partition_holds_through_random_moves(session, registry):
    start(session)
    category_ids = registry.ids()
    numbers = [q.number for q in session.selected_questions]
    for step in range(60):
        number = numbers[(step * 7) % len(numbers)]
        session.select_number(number)
        session.place_in_category(category_ids[step % len(category_ids)])
        if step % 5 == 0:
            for category_id, items in session.assignments.items():
                if items:
                    session.remove_from_category(items[0], category_id)
                    break
        assert_partition(session)


def test_correct_placement_scores_and_saves(small_session, leaderboard_store):
    start(small_session, name="  Ada  ")
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    assert small_session.submit()
    assert small_session.phase is GamePhase.RESULTS
    assert small_session.results == ClassificationResults(correct=1, wrong=0, total=1)
    assert small_session.continue_after_results()
    assert small_session.phase is GamePhase.GAME_OVER
    assert small_session.score == 10
    expected = LeaderboardEntry(name="Ada", score=10, date=FIXED_NOW.isoformat())
    assert leaderboard_store.load() == [expected]
    assert small_session.leaderboard == [expected]


def test_wrong_placement_scores_zero_and_saves_nothing(small_session, leaderboard_store):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("rational")
    small_session.submit()
    assert small_session.results == ClassificationResults(correct=0, wrong=1, total=1)
    small_session.continue_after_results()
    assert small_session.score == 0
    assert leaderboard_store.load() == []


def test_unplaced_numbers_are_not_counted(session):
    start(session)
    session.submit()
    assert session.results == ClassificationResults(correct=0, wrong=0, total=0)


def test_results_total_is_sum_of_counts(session, registry):
    start(session)
    for index, question in enumerate(session.selected_questions[:12]):
        session.select_number(question.number)
        target = question.correct_category if index % 2 else registry.ids()[0]
        session.place_in_category(target)
    session.submit()
    results = session.results
    assert results.total == results.correct + results.wrong
    assert results.total == 12
    assert results.total <= 20


def test_submit_with_everything_correct(session):
    start(session)
    for question in session.selected_questions:
        session.select_number(question.number)
        session.place_in_category(question.correct_category)
    session.submit()
    session.continue_after_results()
    assert session.results == ClassificationResults(correct=20, wrong=0, total=20)
    assert session.score == 200


def test_continue_is_only_applied_once(small_session, leaderboard_store):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    small_session.submit()
    assert small_session.continue_after_results()
    assert small_session.continue_after_results() is False
    assert len(leaderboard_store.load()) == 1


def test_submit_is_only_applied_once(session):
    start(session)
    assert session.submit()
    assert session.submit() is False


def test_timer_counts_while_playing(session, ticker):
    start(session)
    ticker.fire(3)
    assert session.elapsed_seconds == 3


def test_timer_stops_on_submit(session, ticker):
    start(session)
    ticker.fire(2)
    stale_callback = ticker.callback
    session.submit()
    assert not ticker.is_running
    stale_callback()
    ticker.fire(5)
    assert session.elapsed_seconds == 2


def test_stale_tick_from_previous_game_is_ignored(session, ticker):
    start(session)
    old_callback = ticker.callback
    session.submit()
    session.continue_after_results()
    session.return_to_start()
    session.start_game()
    old_callback()
    assert session.elapsed_seconds == 0
    ticker.fire()
    assert session.elapsed_seconds == 1


def test_tick_outside_playing_is_ignored(session):
    assert session.tick() is False
    assert session.elapsed_seconds == 0


def test_return_to_start_keeps_name_and_resets_game(small_session):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    small_session.submit()
    small_session.continue_after_results()
    assert small_session.return_to_start()
    assert small_session.phase is GamePhase.START
    assert small_session.player_name == "Ada"
    assert small_session.pool == []
    assert small_session.assignments == {}
    assert small_session.results is None
    assert small_session.score == 0
    assert small_session.elapsed_seconds == 0


def test_new_game_resets_previous_state(small_session):
    start(small_session)
    small_session.select_number("2i")
    small_session.place_in_category("imaginary")
    small_session.submit()
    small_session.continue_after_results()
    small_session.return_to_start()
    assert small_session.start_game()
    assert small_session.assignments == {}
    assert small_session.results is None
    assert len(small_session.pool) == 3


def test_illegal_transitions_are_rejected(session):
    assert session.submit() is False
    assert session.continue_after_results() is False
    assert session.return_to_start() is False
    start(session)
    assert session.start_game() is False
    assert session.go_to_instructions() is False
    assert session.return_to_start() is False
    assert session.continue_after_results() is False
    assert session.phase is GamePhase.PLAYING


def test_board_intents_rejected_outside_playing(session):
    assert session.select_number("2i") is False
    assert session.place_in_category("imaginary") is False
    assert session.remove_from_category("2i", "imaginary") is False


def test_leaderboard_overlay_phases(session):
    assert session.open_leaderboard()
    assert session.leaderboard_open
    assert session.close_leaderboard()
    assert session.close_leaderboard() is False
    start(session)
    assert session.open_leaderboard() is False
    session.submit()
    assert session.open_leaderboard() is False
    session.continue_after_results()
    assert session.open_leaderboard()


def test_starting_game_closes_leaderboard(session):
    session.set_player_name("Ada")
    session.open_leaderboard()
    session.start_game()
    assert session.leaderboard_open is False


def test_leaderboard_loaded_at_construction(small_bank, registry, leaderboard_store, ticker):
    entry = LeaderboardEntry(name="Lin", score=30, date=FIXED_NOW.isoformat())
    leaderboard_store.save(entry)
    session = make_session(small_bank, registry, leaderboard_store, ticker)
    assert session.leaderboard == [entry]


def test_same_seed_draws_same_numbers(bank, registry, leaderboard_store, ticker):
    first = make_session(bank, registry, leaderboard_store, ticker, seed=3)
    second = make_session(bank, registry, leaderboard_store, ticker, seed=3)
    start(first)
    start(second)
    assert first.pool == second.pool


def test_set_shuffle_seed_repeats_draw(session):
    session.set_player_name("Ada")
    session.set_shuffle_seed(11)
    session.start_game()
    first_draw = session.pool
    session.submit()
    session.continue_after_results()
    session.return_to_start()
    session.set_shuffle_seed(11)
    session.start_game()
    assert session.pool == first_draw


def test_rejected_intents_are_logged_at_debug(session, caplog):
    with caplog.at_level(logging.DEBUG, logger="numclass_app.core.services.game_session"):
        session.submit()
    assert "Ignored submit" in caplog.text


def test_shutdown_stops_ticker(session, ticker):
    start(session)
    session.shutdown()
    assert not ticker.is_running
