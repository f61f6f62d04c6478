import os

import pytest

# Widgets need a platform plugin even without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from Algebra import config_manager
from Algebra import error as E
from Algebra import UI


def run_worker(problem):
    received = []
    worker = UI.Worker(problem)
    worker.job_finished.connect(lambda result, equation: received.append((result, equation)))
    worker.run_Calc()
    return received


@pytest.fixture
def window(tmp_path, monkeypatch):
    monkeypatch.setattr(config_manager, "config_json", tmp_path / "config.json")
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    window = UI.SimplifierWindow()
    window.setting_value_list = dict(config_manager.DEFAULT_SETTINGS,
                                     show_equation=True, copy_result=False)
    yield window
    window.close()
    app.processEvents()


def test_worker_emits_the_canonical_form():
    assert run_worker("x + x") == [("2*x", "x + x")]


def test_worker_emits_engine_errors():
    [(result, equation)] = run_worker("1/0")

    assert isinstance(result, E.DivisionByZeroError)
    assert result.equation == "1/0"
    assert equation == "1/0"


def test_result_is_shown_with_its_equation_and_kept_in_history(window):
    window.Calc_result("2*x", "x + x")

    assert window.display.text() == "x + x = 2*x"
    assert window.history.count() == 1
    assert window.last_result == "2*x"
    assert window.thread_active is False


def test_result_without_equation(window):
    window.setting_value_list["show_equation"] = False

    window.Calc_result("x^2 - 1", "(x - 1)*(x + 1)")

    assert window.display.text() == "x^2 - 1"


def test_clear_empties_input_and_display(window):
    window.input_line.setText("x + x")
    window.Calc_result("2*x", "x + x")

    window.clear()

    assert window.input_line.text() == ""
    assert window.display.text() == ""
    assert window.history.count() == 1
