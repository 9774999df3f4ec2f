from spritecomposer.library import IdEnum, LibraryDefinition, make_library_id, populate_library


class Gender(IdEnum):
    none = 0
    male = 1
    female = 2


class Race(IdEnum):
    none = 0
    human = 1
    half_elf = 500
    orc = 1020


class Color(IdEnum):
    none = 0
    black = 1
    steel = 1004


class Part(IdEnum):
    none = 0
    torso = 1
    helmet = 2


def _definition(**overrides):
    values = dict(
        library={"Walk": {}},
        variant_name="plate",
        gender=Gender.male,
        part=Part.torso,
        color=Color.steel,
        races={Race.human, Race.orc},
    )
    values.update(overrides)
    return LibraryDefinition(**values)


def test_id_enum_parts():
    assert Race.half_elf.id_part() == "half_elf"
    assert Race.none.is_none()
    assert not Race.orc.is_none()


def test_library_id_is_built_from_id_parts():
    assert _definition().library_id == "male_torso_plate_steel"


def test_library_id_is_memoized():
    make_library_id.cache_clear()
    first = _definition().library_id
    second = _definition().library_id
    assert first == second
    info = make_library_id.cache_info()
    assert info.misses == 1
    assert info.hits == 1


def test_changed_inputs_give_a_new_id():
    assert _definition(color=Color.black).library_id == "male_torso_plate_black"


def test_validate_reports_none_values(caplog):
    definition = _definition(gender=Gender.none, color=Color.none, part=Part.none, races={Race.none})
    with caplog.at_level("WARNING", logger="spritecomposer.library"):
        problems = definition.validate()
    assert len(problems) == 4
    assert "gender is set to 'none'" in caplog.text


def test_validate_flags_missing_races():
    assert _definition(races=()).validate() == ["no races defined or 'none' among them"]


def test_resolve_requires_gender_part_and_race():
    definition = _definition()
    assert definition.resolve(Gender.male, Part.torso, Race.orc) == {"Walk": {}}
    assert definition.resolve(Gender.female, Part.torso, Race.orc) is None
    assert definition.resolve(Gender.male, Part.helmet, Race.orc) is None
    assert definition.resolve(Gender.male, Part.torso, Race.half_elf) is None


def test_none_part_never_matches():
    definition = _definition(part=Part.none)
    assert not definition.part_ok(Part.none)


def test_mismatch_is_logged_as_error(caplog):
    with caplog.at_level("ERROR", logger="spritecomposer.library"):
        _definition().is_applicable(Gender.female, Part.torso, Race.human)
    assert "Gender mismatch" in caplog.text


def test_resolve_without_library_returns_none():
    assert _definition(library=None).resolve(Gender.male, Part.torso, Race.human) is None


def test_populate_library_prefers_sliced_sprites():
    template = {
        "Walk": {"Walk_Down_0": "dummy-w0", "Walk_Down_1": "dummy-w1"},
        "Idle": {"Idle_Down": "dummy-idle"},
    }
    sprites = {"Walk_Down_0": "new-w0", "Idle_Down": "new-idle", "Unused_0": "x"}
    library, replaced = populate_library(template, sprites)
    assert library == {
        "Walk": {"Walk_Down_0": "new-w0", "Walk_Down_1": "dummy-w1"},
        "Idle": {"Idle_Down": "new-idle"},
    }
    assert replaced == 2
    assert template["Walk"]["Walk_Down_0"] == "dummy-w0"
