"""
End-to-end pipeline tests

Tests the CLI stages: page document → env_check → document_read →
document_apply → results_report → filtered YAML output.
"""

from argparse import Namespace

import pytest
import yaml

from modelgate.__main__ import env_check, document_read, document_apply, results_report
from modelgate.models import ProgramState, pipeline


PAGE_SOURCE = """
id: guide
title: "Setup guide %Show(MFT-2000 + MFT-5000)%"
blocks:
  - id: intro
    text: Welcome
  - id: t2000
    type: toggle
    text: "`{% if mft-2000 %}`"
    children:
      - id: t2000.body
        text: Calibrate the 2000
  - id: notes
    type: toggle
    text: "`bullet:hide`"
"""


@pytest.fixture
def dirs(tmp_path):
    inputdir = tmp_path / "in"
    outputdir = tmp_path / "out"
    inputdir.mkdir()
    (inputdir / "guide.yaml").write_text(PAGE_SOURCE)
    return inputdir, outputdir


def state_make(inputdir, outputdir, models=None, inputFile="guide.yaml") -> ProgramState:
    options = Namespace(inputFile=inputFile, models=models, outputSubdir="filtered", verbosity=0, unrelated=True)
    return ProgramState.state_createFromNamespace(options=options, inputdir=inputdir, outputdir=outputdir)


class TestPipeline:
    """Test the complete filtering pipeline"""

    def test_filtered_page_written(self, dirs):
        inputdir, outputdir = dirs
        state = pipeline(
            state_make(inputdir, outputdir, models="mft-2000"),
            env_check, document_read, document_apply, results_report,
        )

        assert state.enabledModels == ["MFT-2000"]
        assert state.filterResult["shown"] is True
        assert state.filterResult["hidden_count"] == 1

        output_file = outputdir / "filtered" / "guide.yaml"
        assert state.filterResult["output_file"] == str(output_file)
        data = yaml.safe_load(output_file.read_text())
        assert data["title"] == "Setup guide"
        assert [block["id"] for block in data["blocks"]] == ["intro", "t2000"]

    def test_hidden_page_writes_nothing(self, dirs):
        inputdir, outputdir = dirs
        state = pipeline(
            state_make(inputdir, outputdir, models="mft-9000"),
            env_check, document_read, document_apply, results_report,
        )

        assert state.filterResult["shown"] is False
        assert state.filterResult["output_file"] is None
        assert state.filteredPage is None
        assert not (outputdir / "filtered" / "guide.yaml").exists()

    def test_missing_input_exits(self, dirs):
        inputdir, outputdir = dirs
        with pytest.raises(SystemExit) as excinfo:
            env_check(state_make(inputdir, outputdir, inputFile="missing.yaml"))
        assert excinfo.value.code == 1

    def test_malformed_input_exits(self, dirs):
        inputdir, outputdir = dirs
        (inputdir / "bad.yaml").write_text("- not\n- a page\n")
        state = env_check(state_make(inputdir, outputdir, inputFile="bad.yaml"))
        with pytest.raises(SystemExit):
            document_read(state)

    def test_stages_do_not_mutate_input_state(self, dirs):
        inputdir, outputdir = dirs
        initial = state_make(inputdir, outputdir, models="mft-2000")
        env_check(initial)
        assert initial.envOK is False
        assert initial.enabledModels == []
