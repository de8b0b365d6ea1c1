"""Generate synthetic measurement expression files"""
import random
import sys
from pathlib import Path

LENGTH_UNITS = ["millimeters", "centimeters", "meters", "kilometers"]
MASS_UNITS = ["centigrams", "grams", "kilograms", "milligrams"]
VOLUME_UNITS = ["milliliters", "centiliters", "liters", "kiloliters"]
TIME_UNITS = ["seconds", "minutes", "hours"]
OPERATORS = ["+", "-", "*", "/"]

# A Martian year is 687 Earth days
DEFAULT_LINE_COUNT = 687


def random_magnitude() -> float:
    """Random magnitude between 1 and 1000"""
    return round(random.uniform(1, 1000), 4)


def generate_line() -> str:
    """Three measurements joined by two random operators"""
    operator1 = random.choice(OPERATORS)
    operator2 = random.choice(OPERATORS)

    if operator1 in ("+", "-"):
        # Addition and subtraction need units of the same kind
        units = random.choice([LENGTH_UNITS, MASS_UNITS, VOLUME_UNITS, TIME_UNITS])
        unit1 = random.choice(units)
        unit2 = random.choice(units)
    else:
        unit1 = random.choice(LENGTH_UNITS)
        unit2 = random.choice(MASS_UNITS)

    unit3 = random.choice(LENGTH_UNITS)

    return (
        f"{random_magnitude()} {unit1} {operator1} "
        f"{random_magnitude()} {unit2} {operator2} "
        f"{random_magnitude()} {unit3}"
    )


def generate_measurements_file(output_path: str, line_count: int = DEFAULT_LINE_COUNT) -> Path:
    """Write ``line_count`` random expression lines to ``output_path``"""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        for _ in range(line_count):
            f.write(generate_line() + "\n")
    print(f"Created: {path}")
    return path


if __name__ == "__main__":
    output = sys.argv[1] if len(sys.argv) > 1 else "data/generated_measurements.txt"
    count = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_LINE_COUNT
    print("Generating synthetic measurement expressions...")
    generate_measurements_file(output, count)
