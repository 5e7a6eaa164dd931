"""Tests for principle/variant enums and the echo mixin."""

from solidctl.domain.types import EchoMixin, Principle, Variant


class TestEnums:
    def test_principle_order_and_values(self) -> None:
        assert [str(p) for p in Principle] == ["srp", "ocp", "lsp", "isp", "dip"]

    def test_variant_values(self) -> None:
        assert Variant("good") is Variant.GOOD
        assert Variant("bad") is Variant.BAD

    def test_strenum_compares_to_str(self) -> None:
        assert Principle.DIP == "dip"


class TestEchoMixin:
    def test_defaults_to_print(self, capsys) -> None:
        class Speaker(EchoMixin):
            def speak(self) -> None:
                self._echo("hello")

        Speaker().speak()
        assert capsys.readouterr().out == "hello\n"

    def test_injected_sink(self) -> None:
        lines: list[str] = []

        class Speaker(EchoMixin):
            def speak(self) -> None:
                self._echo("hello")

        Speaker(lines.append).speak()
        assert lines == ["hello"]
