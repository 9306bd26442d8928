#!/usr/bin/env python3
"""
命令行接口测试
==============

测试 python -m polycomp_sign 的参数解析和各子命令。
"""

import pytest
from unittest.mock import MagicMock, patch

from polycomp_sign.__main__ import create_parser, main
from polycomp_sign.cli.sign_cli import SignCLI
from polycomp_sign.config.constants import DisplayToken, Transition
from polycomp_sign.core.result import ErrorKind, SignResult
from polycomp_sign.sign.session import SignSessionError


def parse(*argv):
    return create_parser().parse_args(list(argv))


class TestCreateParser:
    """参数解析"""

    def test_page_defaults(self):
        args = parse("page", "--port", "/dev/ttyS0", "HELLO")

        assert args.command == "page"
        assert args.line1 == "HELLO"
        assert args.line2 is None
        assert args.baudrate == 1200
        assert args.width == 16
        assert args.lines == 2
        assert args.address == 0
        assert args.joined_width is None
        assert args.transition == "auto"
        assert args.duration == 3

    def test_page_all_options(self):
        args = parse(
            "page", "--port", "COM1", "HELLO", "WORLD",
            "--center", "--invert", "--last",
            "--transition", "ping_pong", "--duration", "4",
            "--width", "20", "--joined-width", "12",
        )

        assert args.line2 == "WORLD"
        assert args.center and args.invert and args.last
        assert args.transition == "ping_pong"
        assert args.joined_width == 12

    def test_time_and_temp_are_exclusive(self):
        with pytest.raises(SystemExit):
            parse("page", "--port", "COM1", "--time", "--temp")

    def test_unknown_transition_rejected(self):
        with pytest.raises(SystemExit):
            parse("page", "--port", "COM1", "HI", "--transition", "sparkle")

    def test_port_required(self):
        with pytest.raises(SystemExit):
            parse("clock")


class TestSignCLI:
    """SignCLI 的配置与页面构造"""

    def test_build_configs(self):
        args = parse("page", "--port", "COM1", "--width", "20", "--address", "3", "HI")

        serial_config, sign_config = SignCLI.build_configs(args)

        assert serial_config.port == "COM1"
        assert serial_config.baudrate == 1200
        assert sign_config.width == 20
        assert sign_config.joined_width == 10
        assert sign_config.address == 3

    def test_build_page_text(self):
        args = parse("page", "--port", "COM1", "HELLO", "WORLD",
                     "--transition", "slide", "--no-join")

        line1, line2, options = SignCLI.build_page(args)

        assert (line1, line2) == ("HELLO", "WORLD")
        assert options.transition is Transition.SLIDE
        assert options.join is False

    def test_build_page_tokens(self):
        line1, _, options = SignCLI.build_page(parse("page", "--port", "COM1", "--time"))
        assert line1 is DisplayToken.TIME
        assert options.join is None

        line1, _, _ = SignCLI.build_page(parse("page", "--port", "COM1", "--temp"))
        assert line1 is DisplayToken.TEMPERATURE

    @patch("polycomp_sign.cli.sign_cli.SignSession")
    def test_send_page_success(self, mock_session_class):
        sign = MagicMock()
        sign.page.return_value = SignResult.success()
        mock_session_class.open.return_value.__enter__.return_value = sign

        assert SignCLI.send_page(parse("page", "--port", "COM1", "HELLO", "--center")) is True

        line1, line2, options = sign.page.call_args.args
        assert (line1, line2) == ("HELLO", None)
        assert options.center is True

    @patch("polycomp_sign.cli.sign_cli.SignSession")
    def test_send_page_failure(self, mock_session_class, capsys):
        sign = MagicMock()
        sign.page.return_value = SignResult.failure(ErrorKind.ACK_TIMEOUT, "timeout")
        mock_session_class.open.return_value.__enter__.return_value = sign

        assert SignCLI.send_page(parse("page", "--port", "COM1", "HELLO")) is False
        assert "ack_timeout" in capsys.readouterr().out

    @patch("polycomp_sign.cli.sign_cli.SignSession")
    def test_send_page_without_text(self, mock_session_class):
        assert SignCLI.send_page(parse("page", "--port", "COM1")) is False
        mock_session_class.open.assert_not_called()

    @patch("polycomp_sign.cli.sign_cli.SignSession")
    def test_set_clock_session_error(self, mock_session_class):
        mock_session_class.open.side_effect = SignSessionError("无法打开串口 COM1")

        assert SignCLI.set_clock(parse("clock", "--port", "COM1")) is False


class TestMain:
    """主函数退出码"""

    @patch("polycomp_sign.__main__.SignCLI")
    def test_main_page_exit_code(self, mock_cli):
        mock_cli.send_page.return_value = True

        with pytest.raises(SystemExit) as exc_info:
            main(["page", "--port", "COM1", "HI"])

        assert exc_info.value.code == 0

    @patch("polycomp_sign.__main__.SignCLI")
    def test_main_clock_failure_exit_code(self, mock_cli):
        mock_cli.set_clock.return_value = False

        with pytest.raises(SystemExit) as exc_info:
            main(["clock", "--port", "COM1"])

        assert exc_info.value.code == 1

    @patch("polycomp_sign.__main__.SignCLI")
    def test_main_ports(self, mock_cli):
        mock_cli.show_available_ports.return_value = True

        with pytest.raises(SystemExit) as exc_info:
            main(["ports"])

        assert exc_info.value.code == 0
        mock_cli.show_available_ports.assert_called_once()

    def test_main_invalid_config(self, capsys):
        """非法配置返回1"""
        with pytest.raises(SystemExit) as exc_info:
            main(["page", "--port", "COM1", "--width", "0", "HI"])

        assert exc_info.value.code == 1
        assert "参数错误" in capsys.readouterr().out

    def test_main_without_command(self, capsys):
        main([])

        assert "usage" in capsys.readouterr().out.lower()
