# gridsnake/rl/policies/__init__.py
"""Scripted policies for driving SnakeEnv headlessly."""

from gridsnake.rl.policies.random import policy_random
from gridsnake.rl.policies.greedy import policy_greedy, policy_eps_greedy

POLICIES = {
    "random": policy_random,
    "greedy": policy_greedy,
    "eps-greedy": policy_eps_greedy,
}

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy", "POLICIES"]
