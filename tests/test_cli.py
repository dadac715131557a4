'''
Command line interface tests
'''

import logging

import polish.cli
from polish.cli import CLI
from polish.lexer import Lexer

from pytest import raises


class FakeSession:
    '''
    Stand-in for prompt_toolkit's PromptSession, replaying lines.
    '''
    lines = []

    def __init__(self, **kwargs):
        self.kwargs = kwargs
        self.remaining = list(type(self).lines)

    def prompt(self):
        if not self.remaining:
            raise EOFError
        return self.remaining.pop(0)


def test_result(capsys):
    assert CLI().run(['12 + 2 * ( ( 3 * 4 ) + ( 10 / 5 ) )']) == 0
    out, err = capsys.readouterr()
    assert out == 'Result: 40.0\n'
    assert err == ''


def test_problem(capsys):
    assert CLI().run(['1/0']) == 1
    out, err = capsys.readouterr()
    assert out == ''
    assert err.startswith('Problem evaluating expression: Division by zero')


def test_empty_expression(capsys):
    assert CLI().run(['']) == 1
    out, err = capsys.readouterr()
    assert 'Empty or invalid expression' in err


def test_unary_minus(capsys):
    assert CLI().run(['--', '-5+3']) == 1
    out, err = capsys.readouterr()
    assert 'Invalid RPN expression' in err


def test_missing_expression(capsys):
    with raises(SystemExit) as e:
        CLI().run([])
    assert e.value.code == 2
    out, err = capsys.readouterr()
    assert 'expression' in err


def test_expression_and_prompt(capsys):
    with raises(SystemExit) as e:
        CLI().run(['1+1', '--prompt'])
    assert e.value.code == 2


def test_dump(capsys):
    assert CLI().run(['--dump', '2^3^2']) == 0
    out, err = capsys.readouterr()
    assert out.splitlines() == ['<kind>\t<symbol>',
                                'number\t2.0',
                                'number\t3.0',
                                'number\t2.0',
                                'operator\t^',
                                'operator\t^']


def test_dump_problem(capsys):
    assert CLI().run(['-D', '(1']) == 1
    out, err = capsys.readouterr()
    assert 'unbalanced parentheses' in err


def test_raw_grammar(capsys):
    assert CLI().run(['-G']) == 0
    out, err = capsys.readouterr()
    assert out.rstrip('\n') == Lexer.LEXEME.rstrip('\n')


def test_prompt(capsys, monkeypatch):
    monkeypatch.setattr(FakeSession, 'lines', ['1+1', '', '1/0', '2*3'])
    monkeypatch.setattr(polish.cli, 'PromptSession', FakeSession)
    assert CLI().run(['--prompt']) == 0
    out, err = capsys.readouterr()
    assert out == 'Result: 2.0\nResult: 6.0\n'
    assert err.count('Problem evaluating expression') == 1


def test_keyboard_interrupt(capsys, monkeypatch):
    class Interrupted(FakeSession):
        def prompt(self):
            raise KeyboardInterrupt

    monkeypatch.setattr(polish.cli, 'PromptSession', Interrupted)
    assert CLI().run(['-p']) == 1


def test_verbose_logs_steps(capsys, caplog):
    with caplog.at_level(logging.DEBUG):
        assert CLI().run(['-v', '1+2']) == 0
    assert 'Postfix: 1.0 2.0 +' in caplog.messages
    assert '1.0 + 2.0 = 3.0' in caplog.messages


def test_prompt_flag_takes_no_text(capsys):
    # -p 1+2 is an expression plus --prompt, not a prompt reading "1+2".
    with raises(SystemExit) as e:
        CLI().run(['-p', '1+2'])
    assert e.value.code == 2
    out, err = capsys.readouterr()
    assert 'mutually exclusive' in err


def test_prompt_text(capsys, monkeypatch):
    class Recording(FakeSession):
        messages = []

        def __init__(self, **kwargs):
            super().__init__(**kwargs)
            type(self).messages.append(kwargs['message'])

    monkeypatch.setattr(FakeSession, 'lines', ['2^10'])
    monkeypatch.setattr(polish.cli, 'PromptSession', Recording)
    assert CLI().run(['-p', '--prompt-text', '$ ']) == 0
    assert Recording.messages == ['$ ']
    out, err = capsys.readouterr()
    assert out == 'Result: 1024.0\n'
