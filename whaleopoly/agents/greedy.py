"""Greedy agent that prefers buying properties and building."""

from typing import List

from whaleopoly.game import GameState
from whaleopoly.rules import Action, ActionType

from whaleopoly.agents.base import Agent


class GreedyAgent(Agent):
    """
    Simple AI that buys whatever it can comfortably afford and builds on
    every monopoly, rolling once per turn.
    """

    def __init__(self, player_id: str, name: str, max_price_ratio: float = 0.4):
        super().__init__(player_id, name)
        self.max_price_ratio = max_price_ratio

    def choose_action(self, game: GameState, legal_actions: List[Action]) -> Action:
        """
        Choose action with simple greedy strategy.

        Priority order:
        1. Apply an open card
        2. Leave jail before rolling (pass before bail)
        3. Buy the current tile unless it costs too much of our cash
        4. Build
        5. Roll dice once per turn
        6. End turn
        """
        apply_card = self.find_action(legal_actions, ActionType.APPLY_CARD)
        if apply_card:
            return apply_card

        if self.is_jailed(game) and not game.has_rolled:
            leave_jail = (
                self.find_action(legal_actions, ActionType.USE_JAIL_PASS)
                or self.find_action(legal_actions, ActionType.PAY_BAIL)
            )
            if leave_jail:
                return leave_jail

        buy = self.find_action(legal_actions, ActionType.BUY_PROPERTY)
        if buy and game.has_rolled:
            space = game.board.get_purchasable_space(buy.params["position"])
            if space.price <= self.own_state(game).cash * self.max_price_ratio:
                return buy

        build = self.find_action(legal_actions, ActionType.BUILD)
        if build:
            return build

        roll = self.find_action(legal_actions, ActionType.ROLL_DICE)
        if roll and not game.has_rolled:
            return roll

        return self.find_action(legal_actions, ActionType.END_TURN) or legal_actions[0]
