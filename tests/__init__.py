from pathlib import Path
import sys

# src/ layout: make spread_sim importable when the suite runs from a checkout
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))
