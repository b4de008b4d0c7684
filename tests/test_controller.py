"""
Tests for the console flow (mvc/controller.py, mvc/view.py, app.py)
with scripted input.
"""

import pytest

import app
from mvc.controller import ConsoleController
from mvc.model import Calculator
from mvc.view import ConsoleView, HistoryView
from quadrature.gauss_legendre import GaussLegendreRule
from quadrature.rectangle import RectangleRule


def make_controller(lines, view=None, model=None):
    out = []
    ctrl = ConsoleController(
        model=model or Calculator(),
        view=view if view is not None else ConsoleView(write_line=out.append),
        read_line=iter(lines).__next__,
        write_line=out.append,
    )
    return ctrl, out


def test_console_view_formats_result():
    out = []
    ConsoleView(write_line=out.append).update(2.5)
    assert out == ["Result: 2.5"]


def test_rectangle_run():
    ctrl, out = make_controller(["1", "0", "1", "1"])
    result = ctrl.run()

    assert result == pytest.approx(1.0, abs=1e-3)
    assert isinstance(ctrl.model.strategy, RectangleRule)
    assert out[0] == "Enter the coefficients of the polynomial function (separated by spaces):"
    assert "Select an integration method:" in out
    assert "1. Rectangle Integration" in out
    assert "2. Gauss-Legendre Integration" in out
    assert [line for line in out if line.startswith("Result:")] == [f"Result: {result}"]


def test_gauss_legendre_run():
    ctrl, out = make_controller(["0 0 3", "0", "1", "2"])
    assert ctrl.run() == pytest.approx(1.0, abs=1e-12)
    assert isinstance(ctrl.model.strategy, GaussLegendreRule)


def test_invalid_choice_stops_before_integrating():
    history = HistoryView()
    ctrl, out = make_controller(["1 2", "0", "1", "9"], view=history)
    assert ctrl.run() is None
    assert out[-1] == "Invalid choice."
    assert ctrl.model.strategy is None
    assert history.results == []


def test_malformed_coefficient_reports_error():
    ctrl, out = make_controller(["1 two 3"])
    assert ctrl.run() is None
    assert out[-1].startswith("Error: ")
    assert "two" in out[-1]


def test_malformed_bound_reports_error():
    ctrl, out = make_controller(["1", "zero"])
    assert ctrl.run() is None
    assert out[-1].startswith("Error: ")


def test_empty_coefficients_integrate_to_zero():
    ctrl, out = make_controller(["", "0", "1", "1"])
    assert ctrl.run() == 0.0


def test_view_is_unsubscribed_after_run():
    history = HistoryView()
    model = Calculator()
    ctrl, _ = make_controller(["2", "0", "1", "2"], view=history, model=model)
    ctrl.run()
    assert history.results == [pytest.approx(2.0)]

    model.calculate(ctrl.function_factory.create_function([1.0]), 0.0, 1.0)
    assert len(history.results) == 1


def test_app_main(monkeypatch, capsys):
    lines = iter(["1 2 3", "0", "1", "2"])
    monkeypatch.setattr("builtins.input", lambda *args: next(lines))

    app.main()

    captured = capsys.readouterr().out.splitlines()
    results = [line for line in captured if line.startswith("Result: ")]
    assert len(results) == 1
    assert float(results[0].split()[1]) == pytest.approx(3.0, abs=1e-12)


@pytest.mark.parametrize("bound", ["inf", "-inf", "nan"])
def test_non_finite_upper_bound_reports_error(bound):
    ctrl, out = make_controller(["1", "0", bound, "1"])
    assert ctrl.run() is None
    assert out[-1].startswith("Error: ")
    assert "finite" in out[-1]
    assert ctrl.model.strategy is None


def test_non_finite_lower_bound_reports_error():
    ctrl, out = make_controller(["1", "nan"])
    assert ctrl.run() is None
    assert out[-1].startswith("Error: ")


def test_huge_finite_bounds_terminate():
    # the step no longer moves x at this magnitude
    ctrl, out = make_controller(["1", "1e17", "1.00000000000001e17", "1"])
    assert ctrl.run() == pytest.approx(0.001)


def test_history_view_last():
    history = HistoryView()
    assert history.last is None
    history.update(1.5)
    history.update(2.5)
    assert history.last == 2.5
