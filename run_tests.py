import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path("examples")

RUNS = 3

FORBIDDEN_OUTPUT = {
    "Java index exception",
    "ArrayIndexOutOfBoundsException",
}

def run_program():
    result = subprocess.run(
        [
            sys.executable,
            "-m",
            "divguard.cli",
        ],
        capture_output=True,
        text=True,
    )
    return result.returncode, result.stdout, result.stderr

def check_run(expected_stdout, expected_stderr):
    problems = []
    code, stdout, stderr = run_program()

    if code != 0:
        problems.append(f"exit code {code}, expected 0")
    if stdout != expected_stdout:
        problems.append(f"stdout differs:\n{stdout}")
    if stderr != expected_stderr:
        problems.append(f"stderr differs:\n{stderr}")
    for marker in sorted(FORBIDDEN_OUTPUT):
        if marker in stdout + stderr:
            problems.append(f"unexpected output: {marker!r}")

    return problems

def main():
    passed = 0
    failed = 0

    expected_stdout = (EXAMPLES_DIR / "expected_stdout.txt").read_text()
    expected_stderr = (EXAMPLES_DIR / "expected_stderr.txt").read_text()

    for i in range(1, RUNS + 1):
        problems = check_run(expected_stdout, expected_stderr)

        if problems:
            print(f"✗ run {i} did not match the golden output")
            for problem in problems:
                print(f"  {problem}")
            failed += 1
        else:
            print(f"✓ run {i} matched the golden output")
            passed += 1

    print("\nSummary:")
    print(f"  Passed: {passed}")
    print(f"  Failed: {failed}")

    if failed > 0:
        sys.exit(1)

if __name__ == "__main__":
    main()
