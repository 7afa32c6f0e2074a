"""Matching Schemas - Pydantic models for matching problems and their results.

Invariants:
    - Elements are JSON scalars (str or int); JSON object keys always arrive as str,
      so a relation key "1" is read back as the left element 1 when left holds it
    - Every relation key must be a left element; left elements without a key have
      no admissible partners
    - Partners outside right_universe are ignored by the solver, not rejected here
    - In JSON an assignment is a list of {left, right} pairs, so int elements
      survive a dump/load round trip

Design Decisions:
    - Lists at the boundary, frozensets in core: JSON has no set type
    - Duplicate left elements rejected: a left set with repeats has no single size
"""

from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from hallmatch.core.domain_types import TightSearchStrategy

Element = str | int


class MatchingProblem(BaseModel):
    """A left set, a right universe, and each left element's admissible partners."""
    left: list[Element]
    right_universe: list[Element]
    relation: dict[Element, list[Element]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def restore_key_types(cls, data):
        """Map str relation keys back to the left element they spell."""
        if not isinstance(data, dict):
            return data
        left, relation = data.get("left"), data.get("relation")
        if not isinstance(left, list) or not isinstance(relation, dict):
            return data
        spelled = {str(x): x for x in left if not isinstance(x, str)}
        restored = {}
        for key, partners in relation.items():
            if isinstance(key, str) and key not in left:
                key = spelled.get(key, key)
            restored[key] = partners
        return {**data, "relation": restored}

    @model_validator(mode="after")
    def check_relation_keys(self) -> "MatchingProblem":
        if len(set(self.left)) != len(self.left):
            raise ValueError("left contains duplicate elements")
        unknown = [x for x in self.relation if x not in set(self.left)]
        if unknown:
            raise ValueError(f"relation has keys outside left: {unknown}")
        return self

    def partner_sets(self) -> dict:
        """Relation as element -> frozenset for the core."""
        return {x: frozenset(partners) for x, partners in self.relation.items()}


class BuildSummary(BaseModel):
    """Recursion counters of one builder run."""
    base0_steps: int = 0
    base1_steps: int = 0
    strict_steps: int = 0
    tight_steps: int = 0
    max_depth: int = 0
    subsets_probed: int = 0


class AssignedPair(BaseModel):
    left: Element
    right: Element


class MatchingResult(BaseModel):
    """A system of distinct representatives and how it was built."""
    assignment: dict[Element, Element]
    strategy: TightSearchStrategy
    summary: BuildSummary = BuildSummary()

    @field_validator("assignment", mode="before")
    @classmethod
    def pairs_to_mapping(cls, v):
        if isinstance(v, list):
            pairs = [AssignedPair.model_validate(item) for item in v]
            return {pair.left: pair.right for pair in pairs}
        return v

    @field_serializer("assignment", when_used="json")
    def mapping_to_pairs(self, assignment: dict) -> list[dict]:
        return [{"left": x, "right": y} for x, y in assignment.items()]
