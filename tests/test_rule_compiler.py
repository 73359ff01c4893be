"""
Rule compilation and loading tests.

Covers the modifier notation, validation of malformed definitions, the bundled
definitions, and loading rule sets from YAML files through PetrovichConfig.
"""

import logging
import sys
from pathlib import Path
import pytest

# Add the parent directory to path to import rusnames
sys.path.insert(0, str(Path(__file__).parent.parent))

from rusnames.petrovich import (
    Case,
    Gender,
    GenderHeuristic,
    GenderMapping,
    Modifier,
    NameInflector,
    NamePart,
    PetrovichConfig,
    RuleCompiler,
    RuleDefinitionError,
    RuleTag,
)
from rusnames.petrovich_data import GENDER_DEFINITIONS, RULE_DEFINITIONS

VALID_RULE = {"gender": "male", "test": ["ов"], "mods": ["а", "у", "а", "ым", "е"]}

RULES_YAML = """\
lastname:
  exceptions: []
  suffixes:
    - gender: male
      test: [ов]
      mods: [а, у, а, ым, е]
firstname:
  exceptions:
    - gender: male
      test: [Лев]
      mods: [--ьва, --ьву, --ьва, --ьвом, --ьве]
  suffixes: []
middlename:
  exceptions:
  suffixes:
    - gender: androgynous
      test: [ич]
      mods: [., ., ., ., .]
      tags: [first_word]
"""

GENDER_YAML = """\
gender:
  lastname:
    suffixes:
      female: [ова]
      male: [ов]
  firstname:
    exceptions:
      androgynous: [саша]
    suffixes:
      female: [а]
  middlename:
    suffixes:
      male: [ич]
"""


@pytest.fixture
def compiler():
    return RuleCompiler()


class TestModifierNotation:
    @pytest.mark.parametrize(
        "notation,expected",
        [
            (".", Modifier.identity()),
            ("а", Modifier(trim=0, suffix="а")),
            ("-ы", Modifier(trim=1, suffix="ы")),
            ("--ого", Modifier(trim=2, suffix="ого")),
            ("---етра", Modifier(trim=3, suffix="етра")),
            ("--", Modifier(trim=2, suffix="")),
        ],
    )
    def test_parse_modifier(self, compiler, notation, expected):
        assert compiler.parse_modifier(notation) == expected

    def test_non_string_modifier_is_rejected(self, compiler):
        with pytest.raises(RuleDefinitionError):
            compiler.parse_modifier(3)


class TestRuleValidation:
    def test_valid_rule(self, compiler):
        rule = compiler.compile_rule(VALID_RULE)
        assert rule.gender is Gender.MALE
        assert rule.test == ("ов",)
        assert rule.tags == frozenset()
        assert rule.modifier(Case.INSTRUMENTAL) == Modifier(trim=0, suffix="ым")

    def test_mods_are_keyed_by_case(self, compiler):
        rule = compiler.compile_rule({"gender": "female", "test": ["ь"], "mods": ["-и", "-и", ".", "ю", "-и"]})
        assert set(rule.mods) == set(Case)
        assert rule.mods[Case.ACCUSATIVE].unchanged
        assert rule.mods[Case.INSTRUMENTAL] == Modifier(trim=0, suffix="ю")

    def test_mods_are_read_only(self, compiler):
        rule = compiler.compile_rule(VALID_RULE)
        with pytest.raises(TypeError):
            rule.mods[Case.GENITIVE] = Modifier.identity()

    def test_rules_are_hashable(self, compiler):
        rule = compiler.compile_rule(VALID_RULE)
        same = compiler.compile_rule(VALID_RULE)
        assert hash(rule) == hash(same)
        assert rule == same
        assert {rule, same} == {rule}

    def test_patterns_are_lowercased(self, compiler):
        rule = compiler.compile_rule({**VALID_RULE, "test": ["ОВ", "Ев", "ов"]})
        assert rule.test == ("ов", "ев")

    def test_tags_are_parsed(self, compiler):
        rule = compiler.compile_rule({**VALID_RULE, "tags": ["first_word"]})
        assert rule.tags == frozenset({RuleTag.FIRST_WORD})
        assert rule.is_first_word_only()

    @pytest.mark.parametrize(
        "broken",
        [
            {**VALID_RULE, "gender": "neuter"},
            {**VALID_RULE, "mods": ["а", "у", "а", "ым"]},
            {**VALID_RULE, "mods": ["а", "у", "а", "ым", "е", "е"]},
            {**VALID_RULE, "mods": ["а", "у", "а", "ым", None]},
            {**VALID_RULE, "test": []},
            {**VALID_RULE, "test": [""]},
            {**VALID_RULE, "test": "ов"},
            {**VALID_RULE, "tags": ["last_word"]},
            {"gender": "male", "test": ["ов"]},
            {"test": ["ов"], "mods": VALID_RULE["mods"]},
            ["male", ["ов"]],
        ],
    )
    def test_malformed_rule_is_rejected(self, compiler, broken):
        with pytest.raises(RuleDefinitionError):
            compiler.compile_rule(broken)

    def test_error_message_names_the_location(self, compiler):
        definitions = {
            "lastname": {"exceptions": [], "suffixes": [VALID_RULE, {**VALID_RULE, "gender": "x"}]},
            "firstname": {"exceptions": [], "suffixes": []},
            "middlename": {"exceptions": [], "suffixes": []},
        }
        with pytest.raises(RuleDefinitionError, match=r"lastname\.suffixes\[1\]"):
            compiler.compile_rules(definitions)

    def test_missing_name_part_is_rejected(self, compiler):
        with pytest.raises(RuleDefinitionError, match="middlename"):
            compiler.compile_rules(
                {
                    "lastname": {"exceptions": [], "suffixes": []},
                    "firstname": {"exceptions": [], "suffixes": []},
                }
            )

    def test_missing_list_kind_is_rejected(self, compiler):
        with pytest.raises(RuleDefinitionError, match="exceptions"):
            compiler.compile_rules(
                {
                    "lastname": {"suffixes": []},
                    "firstname": {"exceptions": [], "suffixes": []},
                    "middlename": {"exceptions": [], "suffixes": []},
                }
            )


class TestGenderCompilation:
    def test_unwraps_top_level_gender_key(self, compiler):
        heuristics = compiler.compile_gender_heuristics(
            {
                "gender": {
                    "lastname": {"suffixes": {"male": ["ов"]}},
                    "firstname": {"suffixes": {}},
                    "middlename": {"suffixes": {"female": ["НА"]}},
                }
            }
        )
        assert heuristics.lastname.exceptions is None
        assert heuristics.middlename.suffixes.female == frozenset({"на"})

    def test_unknown_category_is_rejected(self, compiler):
        with pytest.raises(RuleDefinitionError):
            compiler.compile_gender_heuristics(
                {
                    "lastname": {"suffixes": {"neuter": ["о"]}},
                    "firstname": {"suffixes": {}},
                    "middlename": {"suffixes": {}},
                }
            )

    def test_missing_suffixes_is_rejected(self, compiler):
        with pytest.raises(RuleDefinitionError):
            compiler.compile_gender_heuristics(
                {"lastname": {"exceptions": {}}, "firstname": {"suffixes": {}}, "middlename": {"suffixes": {}}}
            )

    def test_androgynous_exception_does_not_fall_through_to_suffixes(self):
        heuristic = GenderHeuristic(
            exceptions=GenderMapping(androgynous=frozenset({"саша"})),
            suffixes=GenderMapping(female=frozenset({"а"})),
        )
        assert heuristic.detect_gender("саша") is None
        assert heuristic.detect_gender("маша") is Gender.FEMALE

    def test_suffix_categories_checked_in_fixed_order(self):
        mapping = GenderMapping(
            androgynous=frozenset({"ко"}), male=frozenset({"о"}), female=frozenset({"нко"})
        )
        assert mapping.classify("петренко", exact=False) is Gender.ANDROGYNOUS
        assert GenderMapping(male=frozenset({"о"}), female=frozenset({"нко"})).classify(
            "петренко", exact=False
        ) is Gender.FEMALE


class TestBundledDefinitions:
    def test_bundled_rules_compile(self, compiler):
        rules = compiler.compile_rules(RULE_DEFINITIONS)
        for part in NamePart:
            table = rules.for_part(part)
            assert len(table.suffixes) > 0
            for rule in table.exceptions + table.suffixes:
                assert rule.test
                assert all(pattern == pattern.lower() for pattern in rule.test)
                assert set(rule.mods) == set(Case)
                assert rule.gender in Gender

    def test_bundled_modifiers_never_trim_past_their_patterns(self, compiler):
        rules = compiler.compile_rules(RULE_DEFINITIONS)
        for part in NamePart:
            table = rules.for_part(part)
            for rule in table.exceptions + table.suffixes:
                shortest = min(len(pattern) for pattern in rule.test)
                for modifier in rule.mods.values():
                    assert modifier.unchanged or modifier.trim <= shortest, (part, rule.test)

    def test_bundled_gender_heuristics_compile(self, compiler):
        heuristics = compiler.compile_gender_heuristics(GENDER_DEFINITIONS)
        assert heuristics.firstname.exceptions is not None
        assert heuristics.middlename.exceptions is None
        assert "ич" in heuristics.middlename.suffixes.male


class TestYamlLoading:
    def test_rules_loaded_from_yaml(self, tmp_path):
        rules_file = tmp_path / "rules.yml"
        rules_file.write_text(RULES_YAML, encoding="utf-8")

        inflector = NameInflector(PetrovichConfig.create_default().with_rules_file(rules_file))

        assert inflector.lastname(Gender.MALE, "Иванов", Case.INSTRUMENTAL) == "Ивановым"
        assert inflector.firstname(Gender.MALE, "Лев", Case.DATIVE) == "Льву"
        # The YAML set has no rule for this, the bundled set does
        assert inflector.firstname(Gender.MALE, "Саша", Case.DATIVE) == "Саша"
        assert inflector.rules.middlename.exceptions == ()
        assert inflector.rules.middlename.suffixes[0].is_first_word_only()

    def test_gender_loaded_from_yaml(self, tmp_path):
        gender_file = tmp_path / "gender.yml"
        gender_file.write_text(GENDER_YAML, encoding="utf-8")

        inflector = NameInflector(PetrovichConfig.create_default().with_gender_file(str(gender_file)))

        assert inflector.detect_gender("Иванова", "Саша", None) is Gender.FEMALE
        assert inflector.detect_gender(None, "Саша", None) is Gender.ANDROGYNOUS
        # "Игорь" is only known to the bundled heuristics
        assert inflector.detect_gender(None, "Игорь", None) is Gender.ANDROGYNOUS

    def test_missing_file_fails_on_first_use(self, tmp_path, caplog):
        config = PetrovichConfig.create_default().with_rules_file(tmp_path / "missing.yml")

        with caplog.at_level(logging.WARNING):
            inflector = NameInflector(config)
        assert "Will load lazily" in caplog.text

        with pytest.raises(FileNotFoundError):
            inflector.lastname(Gender.MALE, "Иванов", Case.GENITIVE)

    @pytest.mark.parametrize(
        "content",
        [
            "- just\n- a list\n",
            RULES_YAML.split("middlename:")[0],
            "lastname: {exceptions: [, suffixes: []}\n",
        ],
        ids=["not-a-mapping", "missing-middlename", "yaml-syntax-error"],
    )
    def test_malformed_rules_file_fails_at_construction(self, tmp_path, caplog, content):
        rules_file = tmp_path / "rules.yml"
        rules_file.write_text(content, encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(RuleDefinitionError):
                NameInflector(PetrovichConfig.create_default().with_rules_file(rules_file))
        assert "Will load lazily" not in caplog.text

    def test_yaml_syntax_error_names_the_file(self, tmp_path):
        gender_file = tmp_path / "gender.yml"
        gender_file.write_text("gender: [unclosed\n", encoding="utf-8")

        with pytest.raises(RuleDefinitionError, match="gender.yml") as excinfo:
            NameInflector(PetrovichConfig.create_default().with_gender_file(gender_file))
        assert excinfo.value.__cause__ is not None

    def test_config_updates_are_immutable(self):
        default = PetrovichConfig.create_default()
        updated = default.with_rules_file("rules.yml")
        assert default.rules_file is None
        assert updated.rules_file == Path("rules.yml")
        assert updated.gender_file is None
