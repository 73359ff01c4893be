from rusnames.petrovich import (
    Case,
    Gender,
    GenderHeuristic,
    GenderHeuristics,
    GenderMapping,
    InflectionResult,
    Modifier,
    NameInflector,
    NamePart,
    PetrovichConfig,
    Rule,
    RuleCompiler,
    RuleDefinitionError,
    RuleList,
    RuleTag,
    Rules,
    apply_rule,
    detect_gender,
    firstname,
    inflect_name,
    lastname,
    match_rule,
    middlename,
)

__all__ = [
    "Case",
    "Gender",
    "GenderHeuristic",
    "GenderHeuristics",
    "GenderMapping",
    "InflectionResult",
    "Modifier",
    "NameInflector",
    "NamePart",
    "PetrovichConfig",
    "Rule",
    "RuleCompiler",
    "RuleDefinitionError",
    "RuleList",
    "RuleTag",
    "Rules",
    "apply_rule",
    "detect_gender",
    "firstname",
    "inflect_name",
    "lastname",
    "match_rule",
    "middlename",
]
