# backend/diagram_studio/patterns/registry.py
"""
Pattern Registry - Central store for prompt rule groups

A rule group is a named set of regular expressions that the analyzer
counts against prompt text. Counting is per occurrence, not per pattern.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class RuleCategory(Enum):
    """Which sub-score a rule group feeds"""
    STRUCTURE = "structure"
    KEYWORD = "keyword"
    CONSTRAINT = "constraint"
    VAGUE = "vague"


@dataclass(frozen=True)
class RuleGroup:
    """
    A named rule group

    `weight` is what one occurrence is worth. For structure groups the
    weight is awarded once when the group is present at all.
    """
    id: str
    name: str
    category: RuleCategory
    patterns: Tuple[re.Pattern, ...]
    weight: int = 1
    description: str = ""

    def count(self, text: str) -> int:
        """Number of occurrences across every pattern of the group"""
        return sum(len(pattern.findall(text)) for pattern in self.patterns)

    def matches(self, text: str) -> bool:
        return any(pattern.search(text) for pattern in self.patterns)

    def points(self, text: str) -> int:
        if self.category == RuleCategory.STRUCTURE:
            return self.weight if self.matches(text) else 0
        return self.count(text) * self.weight


def compile_rules(*sources: str, flags: int = 0) -> Tuple[re.Pattern, ...]:
    return tuple(re.compile(source, flags) for source in sources)


class PatternRegistry:
    """
    Central registry for rule groups

    Provides group lookup and per-category counting.
    """

    def __init__(self):
        self.groups: Dict[str, RuleGroup] = {}
        self._category_index: Dict[RuleCategory, List[str]] = {cat: [] for cat in RuleCategory}
        print("[REGISTRY DEBUG] PatternRegistry initialized")

    def register(self, group: RuleGroup) -> None:
        """Register a rule group in the registry"""
        if group.id in self.groups:
            raise ValueError(f"Rule group '{group.id}' is already registered")

        self.groups[group.id] = group
        self._category_index[group.category].append(group.id)

    def get(self, group_id: str) -> Optional[RuleGroup]:
        """Get a rule group by ID"""
        return self.groups.get(group_id)

    def get_by_category(self, category: RuleCategory) -> List[RuleGroup]:
        """Rule groups of a category, in registration order"""
        return [self.groups[gid] for gid in self._category_index.get(category, [])]

    def count(self, category: RuleCategory, text: str) -> int:
        """Total occurrences for every group of a category"""
        return sum(group.count(text) for group in self.get_by_category(category))

    def points(self, category: RuleCategory, text: str) -> int:
        """Weighted, unclamped points for every group of a category"""
        return sum(group.points(text) for group in self.get_by_category(category))

    def match_counts(self, text: str) -> Dict[str, int]:
        """Per-group occurrence counts, only for groups that matched"""
        counts = {gid: group.count(text) for gid, group in self.groups.items()}
        return {gid: c for gid, c in counts.items() if c > 0}

    def get_summary(self) -> List[dict]:
        return [
            {
                "id": group.id,
                "name": group.name,
                "category": group.category.value,
                "weight": group.weight,
                "patterns": [p.pattern for p in group.patterns],
                "description": group.description,
            }
            for group in self.groups.values()
        ]


# Global registry instance
_global_registry: Optional[PatternRegistry] = None


def get_pattern_registry() -> PatternRegistry:
    """Get or create the global pattern registry"""
    global _global_registry
    if _global_registry is None:
        print("[REGISTRY DEBUG] Creating global PatternRegistry")
        registry = PatternRegistry()
        # Import and register rule groups
        from diagram_studio.patterns.catalog import register_all_rule_groups
        register_all_rule_groups(registry)
        _global_registry = registry
    return _global_registry
