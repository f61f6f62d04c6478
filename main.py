# Main.py
""""" Entry point for the Algebra Simplifier.

   Responsibilities:
   - Detect run mode (script vs PyInstaller.exe)
   - Verify required files exist in development mode
   - Load configuration and start the console loop or, with --gui, the Qt window

"""""
import sys
from pathlib import Path
from Algebra import config_manager as config_manager, Console as Console


# Resolve project root depending on run mode (Script or .exe)

if getattr(sys, 'frozen', False):
    PROJECT_ROOT = Path(sys._MEIPASS)
else:
    PROJECT_ROOT = Path(__file__).resolve().parent


REQUIRED_MODULES = [
    "Scanner.py",
    "Nodes.py",
    "Parser.py",
    "Simplifier.py",
    "Canonicalizer.py",
    "MathEngine.py",
    "Console.py",
    "UI.py",
    "config_manager.py",
    "error.py",
]


def check_files_exist():

    """
      Fail fast in development if required files are missing / moved / renamed.
      In production (.exe) the files are embedded by the bundler, the check is skipped.
    """

    modules_dir = PROJECT_ROOT / "Algebra"
    required = [modules_dir / name for name in REQUIRED_MODULES]
    required.append(PROJECT_ROOT / "config.json")
    required.append(PROJECT_ROOT / "ui_strings.json")

    missing_files = [file_path.name for file_path in required if not file_path.exists()]

    if missing_files:
        print("Error: The following files are missing or in the wrong location:")
        for file_name in missing_files:
            print(f"- {file_name}")
        sys.exit(1)


def main(argv=None):

    """
    Load configuration and start the requested driver.
    - Keep this thin: no business logic here.
    """

    argv = sys.argv[1:] if argv is None else argv
    all_settings = config_manager.load_setting_value("all")

    if all_settings["debug"] == True:
        print("Config loaded:", all_settings)

    if "--gui" in argv:
        # Imported lazily so the console works without a display
        from Algebra import UI as UI
        UI.main()
    else:
        Console.run(settings=all_settings)


if __name__ == "__main__":
    is_running_as_exe = getattr(sys, 'frozen', False)

    if not is_running_as_exe:
        check_files_exist()

    main()
