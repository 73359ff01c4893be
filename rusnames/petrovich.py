"""
Russian Personal Name Inflection Module

This module inflects Russian first names, patronymics and surnames into the five oblique
grammatical cases, and guesses a person's grammatical gender from the surface form of
their name.

## Overview

The core functionality is provided by the `NameInflector` class, which applies a curated
table of suffix rules:

1. **Rule Compilation**: Human-authored definitions are validated and frozen into tables
2. **Hyphen Splitting**: Compound names are inflected part by part
3. **Rule Matching**: Exact-word exceptions first, then the longest matching ending
4. **Inflection**: The winning rule's per-case modifier rewrites the word's ending
5. **Gender Detection**: Patronymic, then first name, then surname endings

## Architecture

### Clean Service Separation
- **RuleCompiler**: Pure translation of definition dictionaries into immutable tables
- **RuleLoadingService**: Chooses between bundled definitions and YAML rule files
- **NameInflector**: Main engine that owns the compiled tables

### Immutable Data Structures
- **Rules / RuleList / Rule / Modifier**: Frozen inflection table
- **GenderHeuristics / GenderHeuristic / GenderMapping**: Frozen gender table
- **InflectionResult**: Either-like success/failure for callers that need to know
  whether a name was actually recognised

## Usage Examples

```python
from rusnames import Case, Gender, firstname, lastname, middlename, detect_gender

firstname(Gender.MALE, "Саша", Case.DATIVE)
# Returns: "Саше"

lastname(Gender.MALE, "Иванов-Сидоров", Case.DATIVE)
# Returns: "Иванову-Сидорову"

lastname(Gender.FEMALE, "Станкевич", Case.PREPOSITIONAL)
# Returns: "Станкевич" (feminine surnames ending in a consonant do not decline)

detect_gender(middlename="Олеговна")
# Returns: Gender.FEMALE

# Names without a matching rule are returned untouched
firstname(Gender.MALE, "Blabla", Case.GENITIVE)
# Returns: "Blabla"

# Advanced usage with an inflector instance
from rusnames import NameInflector, NamePart, PetrovichConfig

inflector = NameInflector(PetrovichConfig.create_default().with_rules_file("my_rules.yml"))
result = inflector.inflect(NamePart.FIRSTNAME, Gender.MALE, "Blabla", Case.GENITIVE)
# result.success is False, result.result == "Blabla"
```

## Rule Matching

A name fragment is lowercased and matched against one name part's table:

- **Exceptions** must equal the fragment. The first compatible rule in table order wins.
  Rules tagged `first_word` are skipped for the last part of a hyphenated name.
- **Suffixes** must end the fragment. The rule with the longest matching ending wins;
  equal lengths are resolved by table order.

A rule's gender must equal the requested gender unless the rule is androgynous, which
matches any request.

## Error Handling

- Inflection never raises: unmatched fragments pass through unchanged
- `NameInflector.inflect` reports unmatched fragments via `InflectionResult.failure`
- Malformed rule definitions (and unparsable YAML) raise `RuleDefinitionError` from the
  `NameInflector` constructor; unreadable rule files are retried on first use

## Thread Safety

The compiled tables are immutable and every operation is a pure function of its inputs,
so one inflector can be shared by any number of threads.
"""

from __future__ import annotations
import logging
import time
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple, Union
from dataclasses import dataclass, field, replace

import yaml
from rusnames.petrovich_data import RULE_DEFINITIONS, GENDER_DEFINITIONS


NAME_SEPARATOR = "-"


# ════════════════════════════════════════════════════════════════════════════════
# CLOSED VOCABULARIES
# ════════════════════════════════════════════════════════════════════════════════


class Case(Enum):
    """Grammatical cases a name can be inflected into (the nominative is the input)."""

    GENITIVE = "genitive"
    DATIVE = "dative"
    ACCUSATIVE = "accusative"
    INSTRUMENTAL = "instrumental"
    PREPOSITIONAL = "prepositional"

    @classmethod
    def ordered(cls) -> Tuple["Case", ...]:
        """Order in which rule definitions list their five modifiers."""
        return (cls.GENITIVE, cls.DATIVE, cls.ACCUSATIVE, cls.INSTRUMENTAL, cls.PREPOSITIONAL)


class Gender(Enum):
    """Grammatical gender. On a rule, ANDROGYNOUS matches any requested gender."""

    MALE = "male"
    FEMALE = "female"
    ANDROGYNOUS = "androgynous"


class RuleTag(Enum):
    FIRST_WORD = "first_word"


class NamePart(Enum):
    LASTNAME = "lastname"
    FIRSTNAME = "firstname"
    MIDDLENAME = "middlename"


# ════════════════════════════════════════════════════════════════════════════════
# RESULT TYPES (Either-like error handling)
# ════════════════════════════════════════════════════════════════════════════════


class RuleDefinitionError(ValueError):
    """Raised when rule or gender definitions cannot be compiled."""


@dataclass(frozen=True)
class InflectionResult:
    """Result of an inflection that also reports whether every part was recognised."""

    success: bool
    result: str
    error_message: Optional[str] = None

    @classmethod
    def success_with_name(cls, inflected_name: str) -> "InflectionResult":
        return cls(success=True, result=inflected_name, error_message=None)

    @classmethod
    def failure(cls, error_message: str, passthrough: str = "") -> "InflectionResult":
        """Failure still carries the best-effort name so callers can fall back to it."""
        return cls(success=False, result=passthrough, error_message=error_message)

    def map(self, f) -> "InflectionResult":
        """Functor map operation"""
        if self.success:
            try:
                return InflectionResult.success_with_name(f(self.result))
            except Exception as e:
                return InflectionResult.failure(str(e), self.result)
        return self


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE RULE TABLES
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class Modifier:
    """Rewrite of a word ending: drop `trim` trailing characters, then append `suffix`."""

    trim: int = 0
    suffix: str = ""
    unchanged: bool = False

    @classmethod
    def identity(cls) -> "Modifier":
        return cls(unchanged=True)

    def apply(self, fragment: str) -> str:
        if self.unchanged:
            return fragment
        trim = self.trim
        if trim > len(fragment):
            # Compiled rules never trim past their own test pattern; clamp instead of failing
            logging.debug(f"Modifier trims {trim} characters from '{fragment}', clamping to {len(fragment)}")
            trim = len(fragment)
        return fragment[: len(fragment) - trim] + self.suffix


@dataclass(frozen=True)
class Rule:
    """One inflection rule: the words or endings it covers and a modifier per case."""

    gender: Gender
    test: Tuple[str, ...]
    # MappingProxyType is unhashable; rules hash on their gender, tests and tags
    mods: Mapping[Case, Modifier] = field(hash=False)
    tags: FrozenSet[RuleTag] = frozenset()

    def accepts_gender(self, gender: Gender) -> bool:
        return self.gender is Gender.ANDROGYNOUS or self.gender is gender

    def is_first_word_only(self) -> bool:
        return RuleTag.FIRST_WORD in self.tags

    def matches_exactly(self, fragment: str) -> bool:
        return fragment in self.test

    def suffix_match_length(self, fragment: str) -> int:
        """Length of the longest test pattern ending `fragment`, 0 if none does."""
        return max((len(pattern) for pattern in self.test if fragment.endswith(pattern)), default=0)

    def modifier(self, case: Case) -> Modifier:
        return self.mods[case]


@dataclass(frozen=True)
class RuleList:
    exceptions: Tuple[Rule, ...] = ()
    suffixes: Tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self.exceptions) + len(self.suffixes)


@dataclass(frozen=True)
class Rules:
    """Inflection tables for the three name parts."""

    lastname: RuleList
    firstname: RuleList
    middlename: RuleList

    def for_part(self, part: NamePart) -> RuleList:
        return getattr(self, part.value)


@dataclass(frozen=True)
class GenderMapping:
    androgynous: FrozenSet[str] = frozenset()
    male: FrozenSet[str] = frozenset()
    female: FrozenSet[str] = frozenset()

    def classify(self, name: str, exact: bool) -> Optional[Gender]:
        """
        Return the first category containing `name` (or an ending of it when `exact` is
        False), consulted in the order androgynous, female, male.
        """
        for gender, entries in (
            (Gender.ANDROGYNOUS, self.androgynous),
            (Gender.FEMALE, self.female),
            (Gender.MALE, self.male),
        ):
            if exact:
                found = name in entries
            else:
                found = any(name.endswith(entry) for entry in entries)
            if found:
                return gender
        return None


@dataclass(frozen=True)
class GenderHeuristic:
    suffixes: GenderMapping
    exceptions: Optional[GenderMapping] = None

    def detect_gender(self, name: str) -> Optional[Gender]:
        """Gender signalled by a lowercased name, None when it carries no signal."""
        if self.exceptions is not None:
            verdict = self.exceptions.classify(name, exact=True)
            if verdict is Gender.ANDROGYNOUS:
                return None
            if verdict is not None:
                return verdict

        verdict = self.suffixes.classify(name, exact=False)
        if verdict is Gender.ANDROGYNOUS:
            return None
        return verdict


@dataclass(frozen=True)
class GenderHeuristics:
    lastname: GenderHeuristic
    firstname: GenderHeuristic
    middlename: GenderHeuristic

    def for_part(self, part: NamePart) -> GenderHeuristic:
        return getattr(self, part.value)


@dataclass(frozen=True)
class InflectionTables:
    """Immutable container for everything the engine reads."""

    rules: Rules
    gender: GenderHeuristics


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class PetrovichConfig:
    """Immutable configuration: where rule definitions come from."""

    # YAML rule files; None selects the definitions bundled in petrovich_data
    rules_file: Optional[Path]
    gender_file: Optional[Path]

    @classmethod
    def create_default(cls) -> "PetrovichConfig":
        """Factory method for the bundled rule set."""
        return cls(rules_file=None, gender_file=None)

    def with_rules_file(self, rules_file: Union[str, Path]) -> "PetrovichConfig":
        """Immutable update method."""
        return replace(self, rules_file=Path(rules_file))

    def with_gender_file(self, gender_file: Union[str, Path]) -> "PetrovichConfig":
        """Immutable update method."""
        return replace(self, gender_file=Path(gender_file))


# ════════════════════════════════════════════════════════════════════════════════
# RULE COMPILATION SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class RuleCompiler:
    """Validates human-authored definitions and freezes them into rule tables."""

    IDENTITY_MARK = "."
    TRIM_MARK = "-"

    def compile_rules(self, definitions: Mapping[str, Any]) -> Rules:
        """Compile `{part: {exceptions: [...], suffixes: [...]}}` into `Rules`."""
        if not isinstance(definitions, Mapping):
            raise RuleDefinitionError("rule definitions must be a mapping of name parts")

        tables = {
            part.value: self._compile_rule_list(self._require(definitions, part.value, "rules"), part.value)
            for part in NamePart
        }
        return Rules(**tables)

    def compile_rule(self, definition: Mapping[str, Any], where: str = "rule") -> Rule:
        if not isinstance(definition, Mapping):
            raise RuleDefinitionError(f"{where}: expected a mapping, got {type(definition).__name__}")

        gender = self._parse_gender(self._require(definition, "gender", where), where)
        test = self._parse_patterns(self._require(definition, "test", where), where)

        raw_mods = self._require(definition, "mods", where)
        cases = Case.ordered()
        if not isinstance(raw_mods, (list, tuple)) or len(raw_mods) != len(cases):
            raise RuleDefinitionError(f"{where}: 'mods' must list exactly {len(cases)} modifiers")
        mods = MappingProxyType(
            {
                case: self.parse_modifier(notation, f"{where}.mods[{index}]")
                for index, (case, notation) in enumerate(zip(cases, raw_mods))
            }
        )

        tags = frozenset(self._parse_tag(tag, where) for tag in definition.get("tags") or ())

        return Rule(gender=gender, test=test, mods=mods, tags=tags)

    def parse_modifier(self, notation: Any, where: str = "modifier") -> Modifier:
        """Parse `"."` (unchanged) or `"--ого"` (drop two letters, append "ого")."""
        if not isinstance(notation, str):
            raise RuleDefinitionError(f"{where}: modifier must be a string, got {notation!r}")
        if notation == self.IDENTITY_MARK:
            return Modifier.identity()
        suffix = notation.lstrip(self.TRIM_MARK)
        return Modifier(trim=len(notation) - len(suffix), suffix=suffix)

    def compile_gender_heuristics(self, definitions: Mapping[str, Any]) -> GenderHeuristics:
        """Compile `{part: {exceptions?: mapping, suffixes: mapping}}` into `GenderHeuristics`."""
        if not isinstance(definitions, Mapping):
            raise RuleDefinitionError("gender definitions must be a mapping of name parts")
        # YAML gender files nest everything under a top-level "gender" key
        if "gender" in definitions and NamePart.LASTNAME.value not in definitions:
            definitions = definitions["gender"]
            if not isinstance(definitions, Mapping):
                raise RuleDefinitionError("gender definitions must be a mapping of name parts")

        heuristics: Dict[str, GenderHeuristic] = {}
        for part in NamePart:
            definition = self._require(definitions, part.value, "gender")
            where = f"gender.{part.value}"
            if not isinstance(definition, Mapping):
                raise RuleDefinitionError(f"{where}: expected a mapping")
            raw_exceptions = definition.get("exceptions")
            heuristics[part.value] = GenderHeuristic(
                suffixes=self._compile_gender_mapping(
                    self._require(definition, "suffixes", where), f"{where}.suffixes"
                ),
                exceptions=(
                    None
                    if raw_exceptions is None
                    else self._compile_gender_mapping(raw_exceptions, f"{where}.exceptions")
                ),
            )
        return GenderHeuristics(**heuristics)

    def _compile_rule_list(self, definition: Any, where: str) -> RuleList:
        if not isinstance(definition, Mapping):
            raise RuleDefinitionError(f"{where}: expected a mapping with 'exceptions' and 'suffixes'")

        compiled: Dict[str, Tuple[Rule, ...]] = {}
        for kind in ("exceptions", "suffixes"):
            entries = self._require(definition, kind, where) or []
            if not isinstance(entries, (list, tuple)):
                raise RuleDefinitionError(f"{where}.{kind}: expected a list of rules")
            compiled[kind] = tuple(
                self.compile_rule(entry, f"{where}.{kind}[{index}]") for index, entry in enumerate(entries)
            )
        return RuleList(exceptions=compiled["exceptions"], suffixes=compiled["suffixes"])

    def _compile_gender_mapping(self, definition: Any, where: str) -> GenderMapping:
        if not isinstance(definition, Mapping):
            raise RuleDefinitionError(f"{where}: expected a mapping of genders")
        unknown = set(definition) - {gender.value for gender in Gender}
        if unknown:
            raise RuleDefinitionError(f"{where}: unknown gender categories {sorted(unknown)}")
        return GenderMapping(
            androgynous=self._parse_word_set(definition.get("androgynous"), f"{where}.androgynous"),
            male=self._parse_word_set(definition.get("male"), f"{where}.male"),
            female=self._parse_word_set(definition.get("female"), f"{where}.female"),
        )

    def _parse_gender(self, value: Any, where: str) -> Gender:
        try:
            return Gender(value)
        except ValueError:
            raise RuleDefinitionError(f"{where}: unknown gender {value!r}") from None

    def _parse_tag(self, value: Any, where: str) -> RuleTag:
        try:
            return RuleTag(value)
        except ValueError:
            raise RuleDefinitionError(f"{where}: unknown tag {value!r}") from None

    def _parse_patterns(self, value: Any, where: str) -> Tuple[str, ...]:
        if not isinstance(value, (list, tuple)) or not value:
            raise RuleDefinitionError(f"{where}: 'test' must be a non-empty list of strings")
        for pattern in value:
            if not isinstance(pattern, str) or not pattern:
                raise RuleDefinitionError(f"{where}: invalid test pattern {pattern!r}")
        # dict.fromkeys keeps authoring order while dropping duplicates
        return tuple(dict.fromkeys(pattern.lower() for pattern in value))

    def _parse_word_set(self, value: Any, where: str) -> FrozenSet[str]:
        if value is None:
            return frozenset()
        if not isinstance(value, (list, tuple)):
            raise RuleDefinitionError(f"{where}: expected a list of strings")
        for word in value:
            if not isinstance(word, str) or not word:
                raise RuleDefinitionError(f"{where}: invalid entry {word!r}")
        return frozenset(word.lower() for word in value)

    @staticmethod
    def _require(definition: Mapping[str, Any], key: str, where: str) -> Any:
        if key not in definition:
            raise RuleDefinitionError(f"{where}: missing required key '{key}'")
        return definition[key]


# ════════════════════════════════════════════════════════════════════════════════
# RULE LOADING SERVICE
# ════════════════════════════════════════════════════════════════════════════════


class RuleLoadingService:
    """Service that reads rule definitions and hands them to the compiler."""

    def __init__(self, config: PetrovichConfig, compiler: RuleCompiler):
        self._config = config
        self._compiler = compiler

    def load_tables(self) -> InflectionTables:
        """Load and compile both tables."""
        rules = self.load_rules()
        gender = self.load_gender_heuristics()
        logging.debug(
            f"Loaded {sum(len(rules.for_part(part)) for part in NamePart)} inflection rules "
            f"from {self._config.rules_file or 'bundled definitions'}"
        )
        return InflectionTables(rules=rules, gender=gender)

    def load_rules(self) -> Rules:
        return self._compiler.compile_rules(self._read_definitions(self._config.rules_file, RULE_DEFINITIONS))

    def load_gender_heuristics(self) -> GenderHeuristics:
        return self._compiler.compile_gender_heuristics(
            self._read_definitions(self._config.gender_file, GENDER_DEFINITIONS)
        )

    def _read_definitions(self, path: Optional[Path], bundled: Mapping[str, Any]) -> Mapping[str, Any]:
        if path is None:
            return bundled
        if not path.exists():
            raise FileNotFoundError(f"Rule definition file not found: {path}")

        with path.open(encoding="utf-8") as f:
            try:
                definitions = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleDefinitionError(f"{path}: {e}") from e
        if not isinstance(definitions, Mapping):
            raise RuleDefinitionError(f"{path}: expected a mapping at the top level")
        return definitions


# ════════════════════════════════════════════════════════════════════════════════
# MATCHING AND INFLECTION ENGINE
# ════════════════════════════════════════════════════════════════════════════════


def match_rule(table: RuleList, fragment: str, gender: Gender, is_last_part: bool = False) -> Optional[Rule]:
    """
    Select the rule that applies to a single name fragment, or None.

    Exceptions are scanned in table order and the first compatible one wins; those
    tagged `first_word` are ignored for the last part of a compound name. Otherwise the
    compatible suffix rule with the longest matching ending wins, the earlier rule on a
    tie.
    """
    lowered = fragment.lower()

    for rule in table.exceptions:
        if (
            rule.matches_exactly(lowered)
            and rule.accepts_gender(gender)
            and not (is_last_part and rule.is_first_word_only())
        ):
            return rule

    best_rule: Optional[Rule] = None
    best_length = 0
    for rule in table.suffixes:
        if not rule.accepts_gender(gender):
            continue
        length = rule.suffix_match_length(lowered)
        if length > best_length:
            best_rule, best_length = rule, length

    return best_rule


def apply_rule(fragment: str, rule: Rule, case: Case) -> str:
    """Apply the rule's modifier for `case` to the fragment as written."""
    return rule.modifier(case).apply(fragment)


def inflect_name(gender: Gender, name: str, case: Case, table: RuleList) -> str:
    """Inflect every hyphen-separated part of `name`; unknown parts are kept verbatim."""
    inflected, _ = _inflect_parts(gender, name, case, table)
    return inflected


def _inflect_parts(gender: Gender, name: str, case: Case, table: RuleList) -> Tuple[str, List[str]]:
    parts = name.split(NAME_SEPARATOR)
    last_index = len(parts) - 1

    inflected: List[str] = []
    unmatched: List[str] = []
    for index, part in enumerate(parts):
        rule = match_rule(table, part, gender, is_last_part=index == last_index)
        if rule is None:
            logging.debug(f"No inflection rule for '{part}' ({gender.value}), leaving it unchanged")
            unmatched.append(part)
            inflected.append(part)
        else:
            inflected.append(apply_rule(part, rule, case))

    return NAME_SEPARATOR.join(inflected), unmatched


# ════════════════════════════════════════════════════════════════════════════════
# MAIN NAME INFLECTOR CLASS
# ════════════════════════════════════════════════════════════════════════════════


class NameInflector:
    """Main Russian name inflection and gender detection service."""

    def __init__(self, config: Optional[PetrovichConfig] = None):
        self._config = config or PetrovichConfig.create_default()
        self._compiler = RuleCompiler()
        self._loader = RuleLoadingService(self._config, self._compiler)
        self._tables: Optional[InflectionTables] = None

        self._initialize()

    def _initialize(self) -> None:
        """
        Compile the rule tables.

        Unreadable rule files are retried on first use. A malformed definition raises
        RuleDefinitionError here and never from an inflection call.
        """
        try:
            self._tables = self._loader.load_tables()
        except OSError as e:
            logging.warning(f"Failed to load inflection rules at construction: {e}. Will load lazily.")

    def _ensure_initialized(self) -> InflectionTables:
        """Ensure the tables are loaded (lazy initialization)."""
        if self._tables is None:
            self._tables = self._loader.load_tables()
        return self._tables

    # Public API methods
    @property
    def config(self) -> PetrovichConfig:
        return self._config

    @property
    def rules(self) -> Rules:
        return self._ensure_initialized().rules

    @property
    def gender_heuristics(self) -> GenderHeuristics:
        return self._ensure_initialized().gender

    def firstname(self, gender: Gender, name: str, case: Case) -> str:
        """Inflect a first name. Unrecognised names are returned unchanged."""
        return inflect_name(gender, name, case, self.rules.firstname)

    def middlename(self, gender: Gender, name: str, case: Case) -> str:
        """Inflect a patronymic. Unrecognised names are returned unchanged."""
        return inflect_name(gender, name, case, self.rules.middlename)

    def lastname(self, gender: Gender, name: str, case: Case) -> str:
        """Inflect a surname. Unrecognised names are returned unchanged."""
        return inflect_name(gender, name, case, self.rules.lastname)

    def inflect(self, part: NamePart, gender: Gender, name: str, case: Case) -> InflectionResult:
        """
        Inflect one name part and report whether every hyphen part found a rule.

        Returns InflectionResult with:
        - success=True, result=inflected name if all parts were recognised
        - success=False, result=best-effort name, error_message naming the first unknown part
        """
        inflected, unmatched = _inflect_parts(gender, name, case, self.rules.for_part(part))
        if unmatched:
            return InflectionResult.failure(f"no matching rule for '{unmatched[0]}'", inflected)
        return InflectionResult.success_with_name(inflected)

    def find_rule(
        self, part: NamePart, fragment: str, gender: Gender, is_last_part: bool = False
    ) -> Optional[Rule]:
        """Expose the matcher for a single (unsplit) fragment."""
        return match_rule(self.rules.for_part(part), fragment, gender, is_last_part)

    def detect_gender(
        self,
        lastname: Optional[str] = None,
        firstname: Optional[str] = None,
        middlename: Optional[str] = None,
    ) -> Gender:
        """
        Guess gender from whichever name parts are given.

        The patronymic is consulted first, then the first name, then the surname; the
        first part giving a definite answer wins. Falls back to Gender.ANDROGYNOUS.
        """
        heuristics = self.gender_heuristics
        for part, value in (
            (NamePart.MIDDLENAME, middlename),
            (NamePart.FIRSTNAME, firstname),
            (NamePart.LASTNAME, lastname),
        ):
            if not value:
                continue
            detected = heuristics.for_part(part).detect_gender(value.lower())
            if detected is not None:
                return detected
        return Gender.ANDROGYNOUS


# ════════════════════════════════════════════════════════════════════════════════
# PERFORMANCE TEST
# ════════════════════════════════════════════════════════════════════════════════


def run_performance_test() -> None:
    """Run a throughput test over a mix of known and unknown names."""
    inflector = NameInflector()

    sample = [
        (NamePart.LASTNAME, Gender.MALE, "Иванов-Сидоров"),
        (NamePart.LASTNAME, Gender.FEMALE, "Достоевская"),
        (NamePart.LASTNAME, Gender.MALE, "Толстой"),
        (NamePart.LASTNAME, Gender.MALE, "Бонч-Бруевич"),
        (NamePart.FIRSTNAME, Gender.MALE, "Пётр"),
        (NamePart.FIRSTNAME, Gender.FEMALE, "Любовь"),
        (NamePart.FIRSTNAME, Gender.MALE, "Blabla"),
        (NamePart.MIDDLENAME, Gender.FEMALE, "Олеговна"),
    ] * 125  # 1000 total

    start = time.perf_counter()
    for part, gender, name in sample:
        for case in Case:
            inflector.inflect(part, gender, name, case)
    elapsed = time.perf_counter() - start

    total = len(sample) * len(Case)
    print(f"Inflected {total} name forms in {elapsed:.3f}s")
    print(f"Rate: {total / elapsed:.0f} forms/second")
    print(f"Time per form: {elapsed / total * 1_000_000:.1f} microseconds")

    start = time.perf_counter()
    for _ in range(1000):
        inflector.detect_gender("Иванова", "Саша", None)
        inflector.detect_gender(None, None, "Олегович")
    elapsed = time.perf_counter() - start
    print(f"\nDetected gender 2000 times in {elapsed:.3f}s ({elapsed / 2000 * 1_000_000:.1f} μs/call)")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global inflector instance for module-level functions
_global_inflector: Optional[NameInflector] = None


def _get_global_inflector() -> NameInflector:
    """Get or create the global inflector instance."""
    global _global_inflector
    if _global_inflector is None:
        _global_inflector = NameInflector()
    return _global_inflector


def firstname(gender: Gender, name: str, case: Case) -> str:
    """Inflect a first name with the bundled rules."""
    return _get_global_inflector().firstname(gender, name, case)


def middlename(gender: Gender, name: str, case: Case) -> str:
    """Inflect a patronymic with the bundled rules."""
    return _get_global_inflector().middlename(gender, name, case)


def lastname(gender: Gender, name: str, case: Case) -> str:
    """Inflect a surname with the bundled rules."""
    return _get_global_inflector().lastname(gender, name, case)


def detect_gender(
    lastname: Optional[str] = None, firstname: Optional[str] = None, middlename: Optional[str] = None
) -> Gender:
    """
    Module-level convenience function for gender detection.

    Args:
        lastname: Surname, if known
        firstname: Given name, if known
        middlename: Patronymic, if known

    Returns:
        Gender.MALE or Gender.FEMALE, Gender.ANDROGYNOUS when nothing is conclusive
    """
    return _get_global_inflector().detect_gender(lastname, firstname, middlename)


# CLI entry point
if __name__ == "__main__":
    run_performance_test()
