"""
Master Test Runner
Runs every sign-data test suite and writes a JSON report
"""
import sys
import os
import time
import json

# Add src to path
sys.path.append(os.path.join(os.path.dirname(__file__), 'src'))
sys.path.append(os.path.join(os.path.dirname(__file__), 'tests'))

from tonsign.demo import tee_output_to_file

TEST_SUITES = [
    ("test_dns", "run_all_dns_tests"),
    ("test_address", "run_all_address_tests"),
    ("test_payload", "run_all_payload_tests"),
    ("test_crypto", "run_all_crypto_tests"),
    ("test_sign", "run_all_sign_tests"),
]


def run_test_suite(test_module_name, test_function_name):
    """Run a test suite and return results"""
    print(f"\n{'='*80}")
    print(f"Running {test_module_name}")
    print(f"{'='*80}")

    try:
        module = __import__(test_module_name)
        test_function = getattr(module, test_function_name)

        start_time = time.time()
        exit_code = test_function()
        duration = time.time() - start_time

        return {
            "suite": test_module_name,
            "passed": exit_code == 0,
            "duration": duration
        }
    except Exception as e:
        print(f"Error running {test_module_name}: {e}")
        import traceback
        traceback.print_exc()
        return {
            "suite": test_module_name,
            "passed": False,
            "duration": 0,
            "error": str(e)
        }


def main():
    """Run all test suites"""
    print("\n" + "="*80)
    print("SIGN-DATA - COMPREHENSIVE TEST SUITE")
    print("="*80)
    print()

    start_time = time.time()
    results = [run_test_suite(module_name, function_name)
               for module_name, function_name in TEST_SUITES]
    total_duration = time.time() - start_time

    print("\n" + "="*80)
    print("FINAL TEST REPORT")
    print("="*80)
    print()

    for result in results:
        status = "PASSED" if result["passed"] else "FAILED"
        print(f"{status} - {result['suite']:<20} ({result['duration']:.2f}s)")
        if not result["passed"] and "error" in result:
            print(f"         Error: {result['error']}")

    all_passed = all(result["passed"] for result in results)

    print()
    print("="*80)
    print(f"Total Duration: {total_duration:.2f}s")
    print("="*80)

    report = {
        "timestamp": time.time(),
        "total_duration": total_duration,
        "all_passed": all_passed,
        "results": results
    }
    os.makedirs("logs", exist_ok=True)
    with open("logs/test_report.json", "w") as f:
        json.dump(report, f, indent=2)
    print("\nTest report saved to logs/test_report.json")

    if all_passed:
        print("\nALL TEST SUITES PASSED!")
        return 0
    print("\nSOME TEST SUITES FAILED")
    return 1

if __name__ == "__main__":
    log_txt_path = os.path.join("logs", "run_all_test_output.txt")
    with tee_output_to_file(log_txt_path):
        print(f"[run_all_test] Writing console output to {log_txt_path}")
        exit_code = main()
        print(f"\nText output saved to {log_txt_path}")
    sys.exit(exit_code)
