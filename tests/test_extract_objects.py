import json

import pytest

from asset_compiler.assets.objects import SPRITE_PARAMETERS, StrategyBoardObject
from asset_compiler.extract_objects import main


def test_no_arguments_extracts_bundled_tables(capsys):
    main([])

    out = capsys.readouterr().out
    parsed = json.loads(out)

    assert out.endswith("\n")
    assert len(parsed) == len(SPRITE_PARAMETERS)
    for (key, record), item in zip(SPRITE_PARAMETERS.items(), parsed):
        assert item["id"] == int(key)
        assert item["name"] == StrategyBoardObject(int(key)).name
        assert {k: v for k, v in item.items() if k not in ("id", "name")} == record


def test_stdout_holds_only_json(capsys):
    main([])
    captured = capsys.readouterr()
    json.loads(captured.out)
    assert "OBJECT EXTRACTION" in captured.err


def test_json_source_scenario(capsys, write_tables):
    ini = write_tables({"3": {"width": 10, "height": 20}}, {"3": "Tower"})

    main(["--config", str(ini)])

    assert capsys.readouterr().out == '[{"id":3,"name":"Tower","width":10,"height":20}]\n'


def test_missing_enumeration_exits_nonzero_without_output(capsys, write_tables, tmp_path):
    ini = write_tables({"9": {"width": 1}}, {})
    target = tmp_path / "assets.json"

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(ini), "--output", str(target)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert "'9'" in captured.err
    assert not target.exists()


def test_output_flag_writes_file(capsys, write_tables, tmp_path):
    ini = write_tables({"1": {}}, {"1": "Circle"})
    target = tmp_path / "build" / "assets.json"

    main(["--config", str(ini), "--output", str(target)])

    assert capsys.readouterr().out == ""
    assert json.loads(target.read_text(encoding="utf-8")) == [{"id": 1, "name": "Circle"}]


def test_strict_ids_flag(capsys, write_tables):
    ini = write_tables({"abc": {}}, {"abc": "Mystery"})

    main(["--config", str(ini)])
    assert capsys.readouterr().out == '[{"id":null,"name":"Mystery"}]\n'

    with pytest.raises(SystemExit):
        main(["--config", str(ini), "--strict-ids"])
    assert capsys.readouterr().out == ""


def test_strict_from_config(capsys, write_tables):
    ini = write_tables({"abc": {}}, {"abc": "Mystery"}, extra="[identifiers]\nstrict = true\n")
    with pytest.raises(SystemExit):
        main(["--config", str(ini)])
    assert capsys.readouterr().out == ""


def test_log_file_records_run(capsys, tmp_path):
    log_path = tmp_path / "extract.log"

    main(["--log", str(log_path)])

    text = log_path.read_text(encoding="utf-8")
    assert "OBJECT EXTRACTION" in text
    assert "0 Error(s) | 0 Warning(s)" in text
    assert "\033[" not in text


def test_unloadable_source_exits_nonzero(capsys, tmp_path):
    ini = tmp_path / "extract.ini"
    ini.write_text("[source]\nkind = json\npath = missing.json\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(ini)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert "missing.json" in captured.err


def test_log_file_from_config(capsys, write_tables, tmp_path):
    ini = write_tables({"3": {"width": 10}}, {"3": "Tower"}, extra="[output]\nlog = run.log\n")

    main(["--config", str(ini)])

    assert capsys.readouterr().out == '[{"id":3,"name":"Tower","width":10}]\n'
    text = (tmp_path / "run.log").read_text(encoding="utf-8")
    assert "OBJECT EXTRACTION" in text
    assert "0 Error(s) | 0 Warning(s)" in text


def test_log_flag_overrides_config_log(capsys, write_tables, tmp_path):
    ini = write_tables({"3": {}}, {"3": "Tower"}, extra="[output]\nlog = run.log\n")
    flag_log = tmp_path / "flag.log"

    main(["--config", str(ini), "--log", str(flag_log)])

    json.loads(capsys.readouterr().out)
    assert "OBJECT EXTRACTION" in flag_log.read_text(encoding="utf-8")
    assert not (tmp_path / "run.log").exists()


def test_unserializable_record_exits_nonzero_without_output(capsys, tmp_path, monkeypatch):
    (tmp_path / "nan_tables.py").write_text(
        "import math\n"
        "PARAMS = {'1': {'x': math.nan}}\n"
        "NAMES = {'1': 'Circle'}\n",
        encoding="utf-8",
    )
    monkeypatch.syspath_prepend(str(tmp_path))
    ini = tmp_path / "extract.ini"
    ini.write_text(
        "[source]\nmodule = nan_tables\nparameters = PARAMS\nenumeration = NAMES\n",
        encoding="utf-8",
    )
    target = tmp_path / "assets.json"

    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(ini), "--output", str(target)])

    captured = capsys.readouterr()
    assert excinfo.value.code == 1
    assert captured.out == ""
    assert "Cannot serialize descriptors" in captured.err
    assert not target.exists()
