import pytest

from minishexec.command import Command, Token, TokenType


def test_name_is_first_argument():
    cmd = Command(args=["ls", "-l", "/tmp"])
    assert cmd.name() == "ls"


def test_name_of_empty_command_is_none():
    assert Command().name() is None


def test_defaults_have_no_redirection():
    cmd = Command(args=["cat"])
    assert cmd.input_file is None
    assert cmd.output_file is None
    assert cmd.append_mode is False
    assert cmd.is_ambiguous is False
    assert cmd.has_redirection is False
    assert cmd.next is None


def test_args_default_not_shared():
    first = Command()
    second = Command()
    first.args.append("echo")
    assert second.args == []


def test_commands_chain_through_next():
    tail = Command(args=["wc"])
    head = Command(args=["ls"], next=tail)
    assert head.next.name() == "wc"


@pytest.mark.parametrize("kind", list(TokenType))
def test_token_keeps_type_and_value(kind):
    token = Token(kind, "text")
    assert token.type is kind
    assert token.value == "text"


def test_token_types_are_distinct():
    tokens = [Token(kind, kind.name) for kind in TokenType]
    assert len({token.type for token in tokens}) == len(tokens)
    out = Token(TokenType.REDIRECT_OUT, ">")
    append = Token(TokenType.REDIRECT_APPEND, ">>")
    assert out.type is not append.type
    assert (out.value, append.value) == (">", ">>")