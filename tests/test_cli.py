# tests/test_cli.py
"""
Command-line tests for brs_scoring.scripts.score_answers.
"""

import io
import json

import pytest

from brs_scoring.scripts.score_answers import load_answers, main


@pytest.fixture
def answers_file(tmp_path):
    path = tmp_path / "answers.json"
    path.write_text(json.dumps([
        {"question_number": 13, "value": 2},
        {"question_number": 14, "value": 3},
        {"question_number": 15, "value": 1},
    ]), encoding="utf-8")
    return path


class TestLoadAnswers:

    def test_list_format(self, answers_file):
        assert load_answers(str(answers_file))[0] == {"question_number": 13, "value": 2}

    def test_mapping_format(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text('{"13": 2, "14": 3}', encoding="utf-8")
        assert load_answers(str(path)) == [
            {"question_number": 13, "value": 2},
            {"question_number": 14, "value": 3},
        ]

    def test_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO('{"1": 4}'))
        assert load_answers("-") == [{"question_number": 1, "value": 4}]

    def test_non_numeric_key_rejected(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text('{"abc": 2}', encoding="utf-8")
        with pytest.raises(ValueError, match="question numbers"):
            load_answers(str(path))

    def test_scalar_rejected(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("5", encoding="utf-8")
        with pytest.raises(ValueError, match="list or object"):
            load_answers(str(path))


class TestScoreCommand:

    def test_score(self, answers_file, capsys):
        assert main(["score", "intralaboral_a", str(answers_file)]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["questionnaire_type"] == "intralaboral_a"
        assert payload["total_results"] == 2
        first = payload["results"][0]
        assert first["dimension"] == "demandas_cuantitativas"
        assert first["transformed_score"] == 50.0
        assert first["risk_level"] == "riesgo_alto"
        assert "intralaboral_total" not in payload

    def test_score_with_totals(self, answers_file, capsys):
        assert main(["score", "intralaboral-form-a", str(answers_file), "--totals"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["intralaboral_total"]["dimension"] == "intralaboral_total"
        assert payload["intralaboral_total"]["raw_score"] == 6

    def test_unknown_variant_exits_1(self, answers_file, capsys):
        assert main(["score", "foo", str(answers_file)]) == 1
        assert capsys.readouterr().out == ""

    def test_out_of_range_answer_exits_1(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text('{"13": 7}', encoding="utf-8")
        assert main(["score", "intralaboral_a", str(path)]) == 1

    def test_missing_file_exits_2(self, tmp_path):
        assert main(["score", "intralaboral_a", str(tmp_path / "missing.json")]) == 2

    def test_malformed_json_exits_2(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("[{", encoding="utf-8")
        assert main(["score", "intralaboral_a", str(path)]) == 2

    @pytest.mark.parametrize("content", ['{"abc": 2}', "5", '"answers"', "null"])
    def test_unexpected_answers_shape_exits_2(self, tmp_path, capsys, content):
        path = tmp_path / "answers.json"
        path.write_text(content, encoding="utf-8")
        assert main(["score", "intralaboral_a", str(path)]) == 2
        assert capsys.readouterr().out == ""

    def test_totals_rejected_for_flat_variant(self, answers_file, capsys):
        assert main(["score", "extralaboral", str(answers_file), "--totals"]) == 1
        assert capsys.readouterr().out == ""

    def test_extralaboral_without_totals(self, answers_file, capsys):
        assert main(["score", "extralaboral", str(answers_file)]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["questionnaire_type"] == "extralaboral"
        assert "intralaboral_total" not in payload


class TestTableCommands:

    def test_summary(self, capsys):
        assert main(["summary"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert set(payload["baremos"]) == {"intralaboral_a", "intralaboral_b", "extralaboral", "stress"}
        assert payload["risk_levels"][0] == "sin_riesgo"

    def test_table(self, capsys):
        assert main(["table", "intralaboral_a", "dimension", "retroalimentacion_desempeño"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["key"] == "retroalimentacion_desempeño"
        assert payload["provenance"] == "official"
        assert list(payload["levels"]) == [
            "sin_riesgo", "riesgo_bajo", "riesgo_medio", "riesgo_alto", "riesgo_muy_alto",
        ]

    def test_missing_table_exits_1(self):
        assert main(["table", "extralaboral", "domain", "extralaboral"]) == 1

    def test_invalid_scope_is_a_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["table", "stress", "section", "x"])
        assert exc_info.value.code == 2
