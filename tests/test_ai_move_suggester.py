import json

import pytest

from dicetactoe.ai_move_suggester import main


def test_simple_output(capsys):
    assert main(['XX__O___O', 'X', '--format', 'simple', '--seed', '1']) == 0
    assert capsys.readouterr().out.strip() == '2'


def test_json_output(capsys):
    assert main(['OO__X____', 'X', '--format', 'json']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['suggested_move'] == 2
    assert data['side'] == 'X'
    assert data['metrics']['search_depth'] == 1


def test_human_output_mentions_move(capsys):
    assert main(['_________', 'O', '--depth', '2', '--seed', '4']) == 0
    out = capsys.readouterr().out
    assert out.startswith('AI Suggested Move: ')
    assert 'Opening move' in out


@pytest.mark.parametrize('argv', [
    ['XXXX', 'X'],
    ['XXXOO____', 'O'],
    ['XOXXOOOXX', 'X'],
    ['X________', 'O', '--depth', '-1'],
])
def test_errors_exit_with_status_1(argv, capsys):
    assert main(argv) == 1
    assert capsys.readouterr().err.startswith('Error: ')
