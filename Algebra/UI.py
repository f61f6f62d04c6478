# UI.py
"""""PySide6 user interface for the algebra simplifier.

Structure
---------
- Simplifier window: input line, result display, history list, action buttons
- Settings dialog: modal dialog for user preferences

Responsibilities (Simplifier window)
------------------------------------
- Dispatch the input line to MathEngine in a worker thread
- Render results (optionally as "input = result") and keep a history
- Show MathEngine errors as dialogs
- Clipboard integration (copy button and optional copy of every result)

Threading Note
--------------
Evaluation runs off the UI thread in Worker(QObject). The result (or error) is
emitted via a Qt signal and handled back in the UI.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, QObject, Signal
import sys
import threading
import pyperclip
from . import error as E  # Imports error.py as a module
from . import config_manager as config_manager  # Imports config_manager.py as a module
from . import MathEngine as MathEngine  # Imports MathEngine.py as a module


DARK_WINDOW_STYLE = "background-color: #121212; color: white;"
DARK_WIDGET_STYLE = "background-color: #121212; color: white; font-weight: bold;"
RETURN_IDLE_STYLE = "background-color: #007bff; color: white; font-weight: bold;"
RETURN_BUSY_STYLE = "background-color: #FF0000; color: white; font-weight: bold;"


class Worker(QObject):
    """""

    Runs in a separate thread and hands the problem to MathEngine.evaluate.
    Emits job_finished(result_or_error, problem) when done.

    """""

    job_finished = Signal(object, str)

    def __init__(self, problem):
        super().__init__()
        self.data = problem

    def run_Calc(self):

        try:
            result = MathEngine.evaluate(self.data)
            self.job_finished.emit(result, self.data)

        except E.MathError as e:
            # Known, handled error (e.g. "Division by Zero Not Defined")
            self.job_finished.emit(e, self.data)

        except Exception as e:
            # Unexpected crash we didn't plan for
            critical_error = E.MathError(
                message=f"Unexpected crash: {e}",
                code="9999",
                equation=self.data
            )
            self.job_finished.emit(critical_error, self.data)


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Boolean settings become checkboxes, text settings become input fields.
    Values and descriptions come from config_manager.

    """""

    settings_saved = Signal()  # Tells the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Setting key -> widget

        # --- 1. Window Setup ---
        self.setWindowTitle("Simplifier Settings")
        self.setMinimumSize(320, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            elif isinstance(value, str):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + ":")
                input_field = QtWidgets.QLineEdit(value)
                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def save_settings(self):
        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                self.setting_value_list[key_value] = widget.isChecked()
            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value = widget.text()
                # Blank input keeps the old value
                if new_value.strip() != "":
                    self.setting_value_list[key_value] = new_value

        saved_settings = config_manager.save_setting(self.setting_value_list)

        if saved_settings != {}:
            self.settings_saved.emit()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 4501: {E.ERROR_MESSAGES['4501']}{config_manager.config_json}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class SimplifierWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State ---
        self.thread_active = False  # Is an evaluation running?
        self.last_result = ""

        # --- 3. Window Setup ---
        self.setWindowTitle("Algebra Simplifier")
        self.resize(480, 360)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        # --- 4. Input and Result ---
        self.input_line = QtWidgets.QLineEdit()
        self.input_line.setPlaceholderText("e.g. 2*(x + 3) - x^2")
        self.input_line.returnPressed.connect(self.start_evaluation)
        main_v_layout.addWidget(self.input_line)

        self.display = QtWidgets.QLineEdit("")
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(18)
        self.display.setFont(font)
        main_v_layout.addWidget(self.display)

        # --- 5. History ---
        self.history = QtWidgets.QListWidget()
        self.history.itemDoubleClicked.connect(lambda item: self.input_line.setText(item.data(Qt.ItemDataRole.UserRole)))
        main_v_layout.addWidget(self.history, 1)

        # --- 6. Buttons ---
        button_row = QtWidgets.QHBoxLayout()
        main_v_layout.addLayout(button_row)
        self.button_objects = {}
        for text, handler in (("⚙", self.open_settings),
                              ("Copy", self.copy_result),
                              ("C", self.clear),
                              ("⏎", self.start_evaluation)):
            button = QtWidgets.QPushButton(text)
            button.clicked.connect(handler)
            button_row.addWidget(button)
            self.button_objects[text] = button

        self.update_darkmode()

    # --- Evaluation ---
    def start_evaluation(self):
        problem = self.input_line.text()
        if problem.strip() == "":
            return

        if self.thread_active:
            print(f"ERROR 4002: {E.ERROR_MESSAGES['4002']}")
            return

        self.thread_active = True
        self.update_return_button()
        self.display.setText("...")

        worker_instance = Worker(problem)
        # Connect before starting so a fast result can't get lost
        worker_instance.job_finished.connect(self.Calc_result)
        self.worker_instance = worker_instance
        my_thread = threading.Thread(target=worker_instance.run_Calc)
        my_thread.start()

    def Calc_result(self, result, equation):
        self.thread_active = False
        self.update_return_button()

        if isinstance(result, E.MathError):
            error_box = QtWidgets.QMessageBox(self)
            error_box.setIcon(QtWidgets.QMessageBox.Icon.Critical)
            error_box.setWindowTitle("Simplification error")
            error_box.setText(f"Error {result.code}: {MathEngine.describe_error(result)}")
            error_box.setInformativeText(f"Details: {result.message}\nEquation: {result.equation}")
            error_box.setStandardButtons(QtWidgets.QMessageBox.StandardButton.Ok)
            error_box.setStyleSheet(self.get_message_box_stylesheet())
            error_box.exec()
            self.display.setText(equation)
            return

        self.last_result = result.strip()

        if self.setting_value_list["show_equation"] == True:
            final_display_text = f"{equation} = {self.last_result}"
        else:
            final_display_text = self.last_result

        self.display.setText(final_display_text)

        item = QtWidgets.QListWidgetItem(f"{equation}  →  {self.last_result}")
        item.setData(Qt.ItemDataRole.UserRole, equation)  # Restores the input on double click
        self.history.addItem(item)
        self.history.scrollToBottom()

        if self.setting_value_list["copy_result"] == True:
            pyperclip.copy(self.last_result)

    # --- Buttons ---
    def copy_result(self):
        if self.last_result:
            pyperclip.copy(self.last_result)

    def clear(self):
        self.input_line.clear()
        self.display.clear()

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # Modal

        # Reload settings after the dialog closes
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    # --- Styling ---
    def update_return_button(self):
        return_button = self.button_objects.get("⏎")
        if not return_button:
            return

        if self.thread_active == True:
            return_button.setStyleSheet(RETURN_BUSY_STYLE)
            return_button.setText("X")
        else:
            return_button.setStyleSheet(RETURN_IDLE_STYLE)
            return_button.setText("⏎")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            for text, button in self.button_objects.items():
                if text != "⏎":
                    button.setStyleSheet(DARK_WIDGET_STYLE)
            self.setStyleSheet(DARK_WINDOW_STYLE)
            self.display.setStyleSheet(DARK_WIDGET_STYLE)
            self.input_line.setStyleSheet(DARK_WIDGET_STYLE)
            self.history.setStyleSheet(DARK_WINDOW_STYLE)
        else:
            for text, button in self.button_objects.items():
                if text != "⏎":
                    button.setStyleSheet("font-weight: normal;")
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")
            self.input_line.setStyleSheet("")
            self.history.setStyleSheet("")

        self.update_return_button()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox { background-color: #121212; color: white; }
                QLabel { color: white; }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        return ""


def main():
    app = QtWidgets.QApplication(sys.argv)
    window = SimplifierWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
