from pathlib import Path
import sys

from streamlit.web import cli as stcli


def main() -> None:
    """Launch the dashboards via `python -m app`, forwarding extra streamlit options."""
    script = Path(__file__).resolve().parent / "app.py"
    sys.argv = ["streamlit", "run", str(script), *sys.argv[1:]]
    stcli.main()


if __name__ == "__main__":
    main()
