"""
Tests for BaseGame metadata, argument merging and the state interface.
"""

import pytest

from bearwatch.games import BaseGame, SessionState


class DummyGame(BaseGame):
    NAME = "Dummy"
    DESCRIPTION = "Test game"
    ARGUMENTS = [
        {'name': '--speed', 'type': float, 'default': None, 'help': 'Speed'},
        {'name': '--seed', 'type': int, 'default': 42, 'help': 'Overridden seed'},
    ]

    def __init__(self, speed=None, **kwargs):
        super().__init__(**kwargs)
        self.speed = speed
        self.started = False

    def _get_internal_state(self):
        return SessionState.RUNNING if self.started else SessionState.NOT_STARTED

    def get_score(self):
        return 0

    def handle_input(self, events):
        pass

    def update(self, dt):
        pass

    def render(self, screen):
        pass


class TestBaseGameMetadata:

    def test_cannot_instantiate_abstract_base(self):
        with pytest.raises(TypeError):
            BaseGame()  # type: ignore

    def test_defaults(self):
        assert BaseGame.NAME == "Unnamed Game"
        assert BaseGame.VERSION == "1.0.0"

    def test_get_info(self):
        info = DummyGame.get_info()
        assert info['name'] == "Dummy"
        assert info['description'] == "Test game"
        assert info['arguments'] == DummyGame.get_arguments()


class TestBaseGameArguments:

    def test_game_arguments_come_first(self):
        names = [a['name'] for a in DummyGame.get_arguments()]
        assert names == ['--speed', '--seed', '--mute']

    def test_game_definition_wins_on_name_clash(self):
        seed = next(a for a in DummyGame.get_arguments() if a['name'] == '--seed')
        assert seed['default'] == 42

    def test_base_arguments_only(self):
        names = [a['name'] for a in BaseGame.get_arguments()]
        assert names == ['--seed', '--mute']


class TestBaseGameState:

    def test_state_delegates_to_internal_state(self):
        game = DummyGame(speed=2.0, unused_flag=True)
        assert game.state == SessionState.NOT_STARTED

        game.started = True
        assert game.state == SessionState.RUNNING

    def test_reset_is_a_no_op_by_default(self):
        game = DummyGame()
        game.reset()
        assert game.state == SessionState.NOT_STARTED
