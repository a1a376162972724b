import pytest

from roman_calc.__main__ import main


def test_to_roman(capsys):
    main(['to-roman', '1994', '4'])
    assert capsys.readouterr().out == 'MCMXCIV\nIV\n'


def test_to_decimal(capsys):
    main(['to-decimal', 'MMXXIV'])
    assert capsys.readouterr().out == '2024\n'


def test_calc(capsys):
    main(['calc', 'X', '-', 'I'])
    assert capsys.readouterr().out == 'IX\n'


def test_check(capsys):
    main(['check', 'XIV'])
    assert capsys.readouterr().out == 'XIV valid\n'
    with pytest.raises(SystemExit) as excinfo:
        main(['check', 'XIV', 'IC'])
    assert excinfo.value.code == 1
    out = capsys.readouterr().out
    assert 'XIV valid' in out
    assert 'IC invalid:' in out


@pytest.mark.parametrize('argv, code', [
    (['to-roman', '4000'], 3),
    (['to-roman', 'twelve'], 3),
    (['to-decimal', ''], 4),
    (['to-decimal', 'IC'], 5),
    (['to-decimal', 'IIII'], 6),
    (['calc', 'I', '-', 'I'], 3),
    (['calc', 'I', '*', 'I'], 7),
])
def test_exit_codes(capsys, argv, code):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code == code
    assert capsys.readouterr().err.startswith('!> ')


def test_missing_command():
    with pytest.raises(SystemExit) as excinfo:
        main([])
    assert excinfo.value.code == 2


def test_to_roman_huge_number(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(['to-roman', '9' * 5000])
    assert excinfo.value.code == 3
    err = capsys.readouterr().err
    assert 'not an integer' not in err
    assert '5000-digit number' in err
