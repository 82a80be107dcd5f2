"""
End-to-end tests for the euro-airspace command line.
"""

import json

import pandas as pd
import pytest

from euro_airspace.cli import main


def test_summary(openair_file, capsys):
    assert main([str(openair_file)]) == 0

    out = capsys.readouterr().out
    assert "openair: 4 airspaces" in out
    assert "Total: 4 airspaces" in out
    assert "CTR" in out


def test_multiple_files(openair_file, tnp_file, capsys):
    assert main([str(openair_file), str(tnp_file)]) == 0

    out = capsys.readouterr().out
    assert "tnp: 3 airspaces" in out
    assert "Total: 7 airspaces" in out


def test_list_with_units(openair_file, capsys):
    assert main([str(openair_file), '--list', '--units', 'australian']) == 0

    out = capsys.readouterr().out
    assert "HAMBURG CTR" in out
    assert "SFC - 2500ft MSL" in out
    assert "radius 2.5NM around 53:20:00 N 010:00:00 E" in out


def test_list_metric(openair_file, capsys):
    assert main([str(openair_file), '--list']) == 0

    out = capsys.readouterr().out
    assert "SFC - 762m MSL" in out
    assert "radius 4.6km around 53:20:00 N 010:00:00 E" in out


def test_json_and_csv_export(openair_file, tmp_path):
    json_path = tmp_path / 'airspaces.json'
    csv_path = tmp_path / 'airspaces.csv'

    assert main([str(openair_file), '--json', str(json_path), '--csv', str(csv_path)]) == 0

    with open(json_path) as f:
        data = json.load(f)
    assert data['count'] == 4

    df = pd.read_csv(csv_path)
    assert list(df['name']) == ["HAMBURG CTR", "ED-R 123", "ED-D 44", "BREMEN TMA"]


def test_unknown_file_fails(unknown_file, capsys):
    assert main([str(unknown_file)]) == 1

    out = capsys.readouterr().out
    assert "Unknown airspace filetype" in out


def test_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / 'missing.txt')]) == 1

    out = capsys.readouterr().out
    assert "Failed (line source error)" in out


def test_abort_on_error(tmp_path, capsys):
    path = tmp_path / 'broken.txt'
    path.write_text("AC R\nDP garbage\nDP 50:00:00 N 010:00:00 E\n")

    assert main([str(path)]) == 0
    assert main([str(path), '--abort-on-error']) == 1


def test_unknown_units_rejected(openair_file):
    with pytest.raises(SystemExit):
        main([str(openair_file), '--units', 'martian'])
