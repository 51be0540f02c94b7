"""Tests for the property, load, analysis, results and model-info managers.

Covers:
  - Materials, frame sections and area sections
  - Load patterns, linear static cases and combinations
  - A rejected SetLoads puts the load case back the way it was
  - Run flags, RunAnalysis and case status
  - Result rows (joint, frame, base, drift, modal) with load-case filters
  - Model file, units and lock state
"""

import pytest

from etabs_client import (
    CaseStatus,
    CNameType,
    EngineRejectedError,
    InvalidArgumentError,
    LoadPatternType,
    MarshallingError,
    MatType,
    Units,
)
from etabs_client.loads import CaseLoad, ComboItem, LoadPattern
from etabs_client.properties import IsotropicProperties, Material, RectangleSection
from etabs_client.results import (
    BaseReactionResult,
    JointDisplacementResult,
    ModalPeriodResult,
)

DRIFT_ROWS = [
    ("Story2", "EQX", "Max", 0.0, "X", 0.0021, "12", 0.0, 0.0, 6.0),
    ("Story1", "EQX", "Max", 0.0, "X", 0.0034, "12", 0.0, 0.0, 3.0),
    ("Story2", "EQY", "Max", 0.0, "Y", -0.0040, "7", 6.0, 0.0, 6.0),
]

MODAL_ROWS = [
    ("Modal", "Mode", 1.0, 0.82, 1.22, 7.66, 58.7),
    ("Modal", "Mode", 2.0, 0.74, 1.35, 8.49, 72.1),
]


# ======================================================================
# Properties
# ======================================================================

class TestMaterials:
    def test_set_and_get(self, model):
        model.materials.set_material("S355", MatType.Steel, notes="EN 10025")
        material = model.materials.get_material("S355")
        assert material == Material("S355", MatType.Steel, -1, "EN 10025", "guid-S355")

    def test_unknown_material_type_refused(self, model, sap_model):
        with pytest.raises(InvalidArgumentError) as info:
            model.materials.set_material("X", 99)
        assert info.value.parameter == "material_type"
        assert sap_model.calls == []

    def test_isotropic(self, model):
        model.materials.set_material("C30", MatType.Concrete)
        model.materials.set_isotropic("C30", IsotropicProperties(3.0e7, 0.2, 1.0e-5))
        props = model.materials.get_isotropic("C30")
        assert props.e == 3.0e7
        assert props.shear_modulus == pytest.approx(1.25e7)

    def test_poisson_out_of_range(self, model):
        with pytest.raises(InvalidArgumentError):
            model.materials.set_isotropic("C30", IsotropicProperties(3.0e7, 0.6, 1.0e-5))

    def test_names_exists_delete(self, model):
        model.materials.set_material("C30", MatType.Concrete)
        model.materials.set_material("C40", MatType.Concrete)
        assert model.materials.get_name_list() == ["C30", "C40"]
        assert model.materials.count() == 2
        assert model.materials.exists("C40")
        model.materials.delete("C40")
        assert not model.materials.exists("C40")
        assert not model.materials.exists("")

    def test_ensure_material(self, model, sap_model):
        assert model.materials.ensure_material("C30", MatType.Concrete) is True
        assert model.materials.ensure_material("C30", MatType.Concrete) is False
        assert sap_model.calls.count("PropMaterial.SetMaterial") == 1

    def test_ensure_material_propagates_real_failures(self, model, sap_model):
        sap_model.fail_next("PropMaterial.SetMaterial", 2)
        with pytest.raises(EngineRejectedError):
            model.materials.ensure_material("C30", MatType.Concrete)

    def test_weight_and_mass(self, model, sap_model):
        model.materials.set_material("C30", MatType.Concrete)
        model.materials.set_weight_and_mass("C30", 1, 25.0)
        assert sap_model.PropMaterial.materials["C30"]["weight"] == (1, 25.0)


class TestSections:
    def test_rectangle(self, grid_model):
        section = grid_model.frame_sections.get_rectangle("COL400")
        assert section == RectangleSection("COL400", "C30", 0.4, 0.4, -1, "", "guid-COL400")
        assert section.area == pytest.approx(0.16)

    def test_rectangle_needs_positive_size(self, grid_model, sap_model):
        with pytest.raises(InvalidArgumentError) as info:
            grid_model.frame_sections.set_rectangle("B", "C30", 0.0, 0.3)
        assert info.value.parameter == "depth"
        assert sap_model.calls == []

    def test_unknown_material_rejected(self, grid_model):
        with pytest.raises(EngineRejectedError):
            grid_model.frame_sections.set_rectangle("B", "NOPE", 0.5, 0.3)

    def test_circle_and_listing(self, grid_model):
        grid_model.frame_sections.set_circle("PILE600", "C30", 0.6)
        assert grid_model.frame_sections.get_name_list() == ["COL400", "PILE600"]
        assert grid_model.frame_sections.count() == 2
        grid_model.frame_sections.delete("PILE600")
        assert grid_model.frame_sections.count() == 1

    def test_slab_and_wall(self, grid_model, sap_model):
        grid_model.area_sections.set_slab("SLAB150", "C30", 0.15)
        grid_model.area_sections.set_wall("WALL250", "C30", 0.25)
        assert grid_model.area_sections.get_name_list() == ["SLAB150", "WALL250"]
        assert sap_model.PropArea.properties["WALL250"]["kind"] == "Wall"
        grid_model.area_sections.delete("SLAB150")
        assert grid_model.area_sections.count() == 1


# ======================================================================
# Loads
# ======================================================================

class TestLoadPatterns:
    def test_add_creates_case(self, model):
        model.load_patterns.add("LIVE", LoadPatternType.Live)
        assert model.load_patterns.exists("LIVE")
        assert model.load_cases.exists("LIVE")

    def test_duplicate_is_engine_rejection(self, model):
        model.load_patterns.add("LIVE", LoadPatternType.Live)
        with pytest.raises(EngineRejectedError) as info:
            model.load_patterns.add("LIVE", LoadPatternType.Live)
        assert info.value.code == 1

    def test_type_and_self_weight(self, model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_patterns.set_load_type("DEAD", LoadPatternType.SuperDead)
        model.load_patterns.set_self_weight_multiplier("DEAD", 0.0)
        assert model.load_patterns.get_load_type("DEAD") is LoadPatternType.SuperDead
        assert model.load_patterns.get_self_weight_multiplier("DEAD") == 0.0

    def test_get_all(self, model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_patterns.add("WX", LoadPatternType.Wind)
        assert model.load_patterns.get_all() == [
            LoadPattern("DEAD", LoadPatternType.Dead, 1.0),
            LoadPattern("WX", LoadPatternType.Wind, 0.0),
        ]
        assert model.load_patterns.count() == 2

    def test_rename_and_delete(self, model):
        model.load_patterns.add("L", LoadPatternType.Live)
        model.load_patterns.change_name("L", "LIVE")
        assert model.load_patterns.get_name_list() == ["LIVE"]
        model.load_patterns.delete("LIVE")
        assert model.load_patterns.get_name_list() == []


class TestLoadCases:
    def test_static_linear(self, model, sap_model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_patterns.add("SDL", LoadPatternType.SuperDead)
        model.load_cases.set_static_linear("GRAV", [CaseLoad("DEAD"), CaseLoad("SDL", 1.2)])
        assert sap_model.LoadCases.cases["GRAV"]["loads"] == [("Load", "DEAD", 1.0), ("Load", "SDL", 1.2)]
        assert "GRAV" in model.load_cases.get_name_list()
        assert model.load_cases.count() == 3

    def test_static_linear_needs_loads(self, model, sap_model):
        with pytest.raises(InvalidArgumentError):
            model.load_cases.set_static_linear("GRAV", [])
        assert sap_model.calls == []

    def test_delete(self, model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead)
        model.load_cases.delete("DEAD")
        assert not model.load_cases.exists("DEAD")

    def test_read_static_linear_loads(self, model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_cases.set_static_linear("GRAV", [CaseLoad("DEAD", 1.35)])
        assert model.load_cases.get_static_linear_loads("GRAV") == [CaseLoad("DEAD", 1.35, "Load")]

    def test_rejected_loads_remove_a_new_case(self, model, sap_model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        sap_model.fail_next("LoadCases.StaticLinear.SetLoads", 1)
        with pytest.raises(EngineRejectedError) as info:
            model.load_cases.set_static_linear("LC1", [CaseLoad("DEAD")])
        assert info.value.operation == "StaticLinear.SetLoads"
        assert "LC1" not in sap_model.LoadCases.cases
        assert "LoadCases.Delete" in sap_model.calls

    def test_rejected_loads_restore_an_existing_case(self, model, sap_model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_patterns.add("SDL", LoadPatternType.SuperDead)
        sap_model.fail_next("LoadCases.StaticLinear.SetLoads", 1)
        with pytest.raises(EngineRejectedError):
            model.load_cases.set_static_linear("DEAD", [CaseLoad("SDL", 2.0)])
        assert sap_model.LoadCases.cases["DEAD"]["loads"] == [("Load", "DEAD", 1.0)]

    def test_failed_restore_keeps_the_original_error(self, model, sap_model, caplog):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        sap_model.fail_next("LoadCases.StaticLinear.SetLoads", 4)
        sap_model.fail_next("LoadCases.Delete", 1)
        with pytest.raises(EngineRejectedError) as info:
            model.load_cases.set_static_linear("LC1", [CaseLoad("DEAD")])
        assert info.value.code == 4
        assert "Could not restore load case 'LC1'" in caplog.text


class TestLoadCombos:
    def test_build_and_read(self, model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead, 1.0)
        model.load_patterns.add("LIVE", LoadPatternType.Live)
        combos = model.load_combos
        combos.add("ULS1")
        combos.set_case_list("ULS1", "DEAD", 1.35)
        combos.set_case_list("ULS1", "LIVE", 1.5)
        assert combos.get_case_list("ULS1") == [
            ComboItem("DEAD", 1.35, CNameType.LoadCase),
            ComboItem("LIVE", 1.5, CNameType.LoadCase),
        ]
        assert combos.get_combination("ULS1").items[1].scale_factor == 1.5
        assert combos.get_name_list() == ["ULS1"]

    def test_nested_combo(self, model):
        model.load_combos.add("ULS1")
        model.load_combos.add("ENV", 1)
        model.load_combos.set_case_list("ENV", "ULS1", 1.0, CNameType.LoadCombo)
        (item,) = model.load_combos.get_case_list("ENV")
        assert item.item_type is CNameType.LoadCombo

    def test_empty_combo_reads_empty(self, model):
        model.load_combos.add("EMPTY")
        assert model.load_combos.get_case_list("EMPTY") == []

    def test_delete(self, model):
        model.load_combos.add("ULS1")
        model.load_combos.delete("ULS1")
        assert model.load_combos.get_name_list() == []


# ======================================================================
# Analysis
# ======================================================================

class TestAnalyze:
    @pytest.fixture
    def cases(self, model):
        for name, kind in (("DEAD", LoadPatternType.Dead), ("LIVE", LoadPatternType.Live),
                           ("EQX", LoadPatternType.Quake)):
            model.load_patterns.add(name, kind)
        return ["DEAD", "LIVE", "EQX"]

    def test_status_before_run(self, model, cases):
        statuses = model.analyze.get_case_status()
        assert [s.case_name for s in statuses] == cases
        assert all(s.status is CaseStatus.NotRun for s in statuses)
        assert not model.analyze.are_all_cases_finished()

    def test_run_cases_flags_only_requested(self, model, cases, sap_model):
        flagged = model.analyze.run_cases(["DEAD", "EQX", "SNOW"], defined_cases=cases)
        assert flagged == ["DEAD", "EQX"]
        flags = {f.case_name: f.run for f in model.analyze.get_run_case_flags()}
        assert flags == {"DEAD": True, "LIVE": False, "EQX": True}
        assert model.analyze.are_all_cases_finished(["DEAD", "EQX"])
        assert not model.analyze.are_all_cases_finished()
        assert sap_model.Analyze.runs == 1

    def test_run_cases_with_nothing_requested(self, model, cases, sap_model):
        assert model.analyze.run_cases([]) == []
        assert sap_model.Analyze.runs == 0

    def test_unknown_case_counts_as_unfinished(self, model, cases):
        model.analyze.run_analysis()
        assert model.analyze.are_all_cases_finished(cases)
        assert not model.analyze.are_all_cases_finished(["DEAD", "MISSING"])

    def test_delete_results_needs_case_name(self, model, cases):
        with pytest.raises(InvalidArgumentError):
            model.analyze.delete_results("", all_cases=False)

    def test_delete_results_resets_status(self, model, cases):
        model.analyze.create_analysis_model()
        model.analyze.run_analysis()
        model.analyze.delete_results("LIVE", all_cases=False)
        status = {s.case_name: s.status for s in model.analyze.get_case_status()}
        assert status["LIVE"] is CaseStatus.NotRun
        assert status["DEAD"] is CaseStatus.Finished

    def test_unknown_status_value_is_marshalling_error(self, model, cases, sap_model):
        sap_model.Analyze.status["DEAD"] = 9
        with pytest.raises(MarshallingError):
            model.analyze.get_case_status()


# ======================================================================
# Results
# ======================================================================

class TestResults:
    def test_output_selection(self, model, sap_model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead)
        model.load_patterns.add("LIVE", LoadPatternType.Live)
        model.results.select_cases(["DEAD", "LIVE"])
        model.results.set_case_selected("LIVE", False)
        assert sap_model.Results.Setup.selected_cases == ["DEAD"]

    def test_selecting_unknown_case_rejected(self, model):
        with pytest.raises(EngineRejectedError) as info:
            model.results.set_case_selected("NOPE")
        assert info.value.operation == "SetCaseSelectedForOutput"

    def test_joint_displacements(self, model, sap_model):
        sap_model.Results.set_rows("JointDispl", [
            ("5", "5", "DEAD", "LinStatic", 0.0, 0.001, 0.0, -0.004, 0.0, 0.0002, 0.0),
            ("5", "5", "LIVE", "LinStatic", 0.0, 0.0005, 0.0, -0.002, 0.0, 0.0001, 0.0),
        ])
        rows = model.results.get_joint_displacements("5", load_case="LIVE")
        assert rows == [JointDisplacementResult("5", "5", "LIVE", "LinStatic", 0.0, 0.0005, 0.0, -0.002,
                                                0.0, 0.0001, 0.0)]
        assert len(model.results.get_joint_displacements()) == 2

    def test_joint_reactions(self, model, sap_model):
        sap_model.Results.set_rows("JointReact", [
            ("1", "1", "DEAD", "LinStatic", 0.0, 0.0, 0.0, 120.0, 0.0, 0.0, 0.0),
        ])
        (row,) = model.results.get_joint_reactions("1")
        assert row.f3 == 120.0

    def test_frame_forces(self, model, sap_model):
        sap_model.Results.set_rows("FrameForce", [
            ("3", 0.0, "3-1", 0.0, "DEAD", "LinStatic", 0.0, -250.0, 5.0, 0.0, 0.0, 0.0, 12.0),
            ("3", 3.0, "3-1", 3.0, "DEAD", "LinStatic", 0.0, -245.0, 5.0, 0.0, 0.0, 0.0, -3.0),
        ])
        rows = model.results.get_frame_forces("3")
        assert [r.object_station for r in rows] == [0.0, 3.0]
        assert rows[0].m3 == 12.0

    def test_frame_forces_need_a_name(self, model, sap_model):
        with pytest.raises(InvalidArgumentError):
            model.results.get_frame_forces("")
        assert sap_model.calls == []

    def test_base_reactions_drop_centroid(self, model, sap_model):
        sap_model.Results.set_rows("BaseReact", [
            ("DEAD", "LinStatic", 0.0, 0.0, 0.0, 1450.0, 10.0, -12.0, 0.0),
        ])
        assert model.results.get_base_reactions() == [
            BaseReactionResult("DEAD", "LinStatic", 0.0, 0.0, 0.0, 1450.0, 10.0, -12.0, 0.0)
        ]

    def test_story_drifts(self, model, sap_model):
        sap_model.Results.set_rows("StoryDrifts", DRIFT_ROWS)
        rows = model.results.get_story_drifts(load_case="EQX")
        assert [r.story for r in rows] == ["Story2", "Story1"]
        assert rows[1].drift_permille == pytest.approx(3.4)

    def test_modal_results(self, model, sap_model):
        sap_model.Results.set_rows("ModalPeriod", MODAL_ROWS)
        sap_model.Results.set_rows("ModalParticipatingMassRatios", [
            ("Modal", "Mode", 1.0, 0.82, 0.71, 0.0, 0.0, 0.71, 0.0, 0.0, 0.0, 0.3, 0.0, 0.0, 0.3, 0.0),
        ])
        periods = model.results.get_modal_periods()
        assert periods[0] == ModalPeriodResult(*MODAL_ROWS[0])
        assert [p.mode for p in periods] == [1, 2]
        (ratio,) = model.results.get_modal_participating_mass_ratios("Modal")
        assert ratio.ux == 0.71
        assert ratio.sum_ux == 0.71

    def test_no_results_is_empty(self, model):
        assert model.results.get_story_drifts() == []
        assert model.results.get_modal_periods() == []


# ======================================================================
# Model info
# ======================================================================

class TestModelInfo:
    def test_version(self, model):
        assert model.info.get_version() == ("22.1.0", 22.1)

    def test_units(self, model):
        assert model.info.get_present_units() is Units.kN_m_C
        model.info.set_present_units(Units.N_mm_C)
        assert model.info.get_present_units() is Units.N_mm_C

    def test_initialize_new_model(self, model, sap_model):
        model.points.add_point(0.0, 0.0, 0.0)
        model.info.initialize_new_model(Units.kip_ft_F)
        assert sap_model.units == Units.kip_ft_F
        assert model.points.count() == 0

    def test_new_grid_only_validates(self, model, sap_model):
        with pytest.raises(InvalidArgumentError) as info:
            model.info.new_grid_only(0, 3.0, 3.0, 2, 2, 6.0, 6.0)
        assert info.value.parameter == "num_stories"
        assert sap_model.calls == []

    def test_new_blank(self, model, sap_model):
        model.load_patterns.add("DEAD", LoadPatternType.Dead)
        model.info.new_blank()
        assert model.load_patterns.count() == 0

    def test_save_and_open(self, model, sap_model):
        model.info.save(r"C:\models\tower.EDB")
        assert model.info.get_model_filename() == r"C:\models\tower.EDB"
        model.info.open(r"C:\models\podium.EDB")
        assert sap_model.filename == r"C:\models\podium.EDB"

    def test_open_rejected(self, model):
        with pytest.raises(EngineRejectedError) as info:
            model.info.open(r"C:\models\podium.txt")
        assert info.value.operation == "OpenFile"

    def test_lock(self, model):
        model.info.set_model_is_locked(True)
        assert model.info.get_model_is_locked() is True
        model.info.set_model_is_locked(False)
        assert model.info.get_model_is_locked() is False
