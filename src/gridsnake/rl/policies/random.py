# gridsnake/rl/policies/random.py
import numpy as np # type: ignore

from gridsnake.game import is_opposite
from gridsnake.rl.env import ACTIONS


def legal_actions(env):
    """Actions the engine would act on; a reversal of a multi-segment snake is dropped."""
    engine = env.engine
    if engine.length == 1:
        return list(ACTIONS)
    return [a for a, d in ACTIONS.items() if not is_opposite(d, engine.direction)]


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """Pick uniformly among the legal actions, so every pick really turns or goes straight."""
    choices = legal_actions(env)
    return int(choices[np.random.randint(len(choices))])
