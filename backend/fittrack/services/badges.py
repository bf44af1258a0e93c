"""Static badge catalog.

Milestone badges unlock on the number of weekly goals met; streak badges on
the longest run of consecutive weeks with at least one goal met. Badges
reward best-ever performance, so the current streak never gates one.
"""

from dataclasses import dataclass

from fittrack.schemas.achievement import Badge


@dataclass(frozen=True)
class BadgeRule:
    id: str
    name: str
    description: str
    icon: str
    category: str  # "milestone" | "streak"
    threshold: int


BADGE_RULES: tuple[BadgeRule, ...] = (
    BadgeRule("first-goal", "First Goal Met", "Complete your first weekly goal", "trophy", "milestone", 1),
    BadgeRule("five-goals", "Goal Crusher", "Complete 5 weekly goals", "medal", "milestone", 5),
    BadgeRule("ten-goals", "Dedicated", "Complete 10 weekly goals", "star", "milestone", 10),
    BadgeRule("twenty-goals", "Unstoppable", "Complete 20 weekly goals", "crown", "milestone", 20),
    BadgeRule("streak-2", "On a Roll", "Meet goals 2 weeks in a row", "flame", "streak", 2),
    BadgeRule("streak-4", "Hot Streak", "Meet goals 4 weeks in a row", "zap", "streak", 4),
    BadgeRule("streak-8", "On Fire", "Meet goals 8 weeks in a row", "rocket", "streak", 8),
    BadgeRule("streak-12", "Legend", "Meet goals 12 weeks in a row", "award", "streak", 12),
)


def evaluate_badges(goals_met_count: int, current_streak: int, longest_streak: int) -> list[Badge]:
    badges: list[Badge] = []
    for rule in BADGE_RULES:
        value = goals_met_count if rule.category == "milestone" else longest_streak
        badges.append(
            Badge(
                id=rule.id,
                name=rule.name,
                description=rule.description,
                icon=rule.icon,
                category=rule.category,
                earned=value >= rule.threshold,
            )
        )
    return badges
