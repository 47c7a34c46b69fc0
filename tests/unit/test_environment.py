"""
Unit tests for the Gymnasium environment.

Tests reset/seeding, rewards, termination, action masks and rendering.
"""
import numpy as np
from minesweeper import BoardConfig, MinesweeperEnv, make_vec_env, render_board


CENTER_MINE = {"mine_positions": [(1, 1)]}


def make_center_env(**kwargs) -> MinesweeperEnv:
    """3x3 environment; reset with CENTER_MINE puts the mine in the middle."""
    return MinesweeperEnv(BoardConfig(3, 3, 1), **kwargs)


# ============================================================================
# Reset Tests
# ============================================================================

class TestReset:
    """Test episode start."""

    def test_reset_returns_hidden_observation(self) -> None:
        env = MinesweeperEnv()
        obs, info = env.reset(seed=0)
        assert obs.shape == (9, 9)
        assert np.all(obs == -1)
        assert info["revealed"] == 0
        assert info["total_safe"] == 71
        assert info["game_state"] == "PLAYING"

    def test_same_seed_same_layout(self) -> None:
        env = MinesweeperEnv()
        env.reset(seed=42)
        first = str(env.board)
        env.reset(seed=42)
        assert str(env.board) == first

    def test_reset_accepts_explicit_layout(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        assert env.board.has_mine(1, 1) is True

    def test_observation_in_space(self) -> None:
        env = MinesweeperEnv()
        obs, _ = env.reset(seed=1)
        assert env.observation_space.contains(obs)


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test rewards and termination."""

    def test_safe_reveal_rewards_one(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        obs, reward, terminated, truncated, info = env.step(0)
        assert reward == 1.0
        assert terminated is False
        assert truncated is False
        assert obs[0, 0] == 1
        assert info["revealed"] == 1
        assert info["steps"] == 1

    def test_mine_terminates_with_penalty(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        _, reward, terminated, _, info = env.step(4)
        assert reward == -10.0
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_repeated_action_is_penalized(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        env.step(0)
        _, reward, _, _, _ = env.step(0)
        assert reward == -0.1

    def test_flagged_target_is_penalized(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        env.board.flag(0, 0)
        _, reward, _, _, _ = env.step(0)
        assert reward == -0.1

    def test_win_rewards_ten(self) -> None:
        env = MinesweeperEnv(BoardConfig(1, 1, 0))
        env.reset(seed=0)
        _, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated is True
        assert info["game_state"] == "WON"


# ============================================================================
# Action Mask Tests
# ============================================================================

class TestActionMask:
    """Test valid action masks."""

    def test_new_episode_all_valid(self) -> None:
        env = MinesweeperEnv()
        env.reset(seed=0)
        mask = env.get_action_mask()
        assert mask.shape == (81,)
        assert mask.all()

    def test_revealed_and_flagged_are_masked(self) -> None:
        env = make_center_env()
        env.reset(options=CENTER_MINE)
        env.step(0)
        env.board.flag(2, 2)
        mask = env.get_action_mask()
        assert not mask[0]
        assert not mask[8]
        assert mask.sum() == 7


# ============================================================================
# Render Tests
# ============================================================================

class TestRender:
    """Test render modes."""

    def test_ansi_render_matches_board_text(self) -> None:
        env = make_center_env(render_mode="ansi")
        env.reset(options=CENTER_MINE)
        env.step(0)
        assert env.render() == render_board(env.board)

    def test_human_render_prints(self, capsys) -> None:
        env = make_center_env(render_mode="human")
        env.reset(options=CENTER_MINE)
        assert env.render() is None
        assert "0/1 flags" in capsys.readouterr().out


# ============================================================================
# Vector Environment Tests
# ============================================================================

class TestVecEnv:
    """Test vectorized environment factory."""

    def test_batched_reset(self) -> None:
        envs = make_vec_env(n_envs=2, config=BoardConfig(4, 4, 2))
        obs, _ = envs.reset(seed=0)
        assert obs.shape == (2, 4, 4)
        envs.close()
