"""
Unit Tests for Account Addresses
Tests raw and user-friendly address parsing and formatting
"""
import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from tonsign.address import AccountId, parse_address, format_address
from tonsign.errors import AddressError

TEST_ADDRESS = "UQCyqTmXJpshFu1GW1tyTX6paa3c-37OG9s3uv8ZzX_9GDfx"
TEST_BOUNCEABLE = "EQCyqTmXJpshFu1GW1tyTX6paa3c-37OG9s3uv8ZzX_9GGo0"
TEST_HASH = bytes.fromhex("b2a93997269b2116ed465b5b724d7ea969addcfb7ece1bdb37baff19cd7ffd18")


def _expect_address_error(text):
    try:
        parse_address(text)
    except AddressError as e:
        print(f"  rejected {text!r}: {e}")
        assert e.stage == "address"
        return e
    raise AssertionError(f"Address {text!r} was accepted")


def test_parse_friendly():
    """Test parsing of url-safe and standard base64 addresses"""
    print("\nTEST: User-friendly Address Parsing")

    account = parse_address(TEST_ADDRESS)
    assert account.workchain == 0
    assert account.hash_part == TEST_HASH

    # Standard alphabet and bounceable flag resolve to the same account
    assert parse_address(TEST_ADDRESS.replace("-", "+").replace("_", "/")) == account
    assert parse_address(TEST_BOUNCEABLE) == account

    print("PASSED: User-friendly addresses parse")
    return True


def test_parse_raw():
    """Test parsing of workchain:hex addresses"""
    print("\nTEST: Raw Address Parsing")

    account = parse_address("0:" + TEST_HASH.hex())
    assert account == AccountId(0, TEST_HASH)
    assert account.to_raw() == "0:" + TEST_HASH.hex()

    master = parse_address("-1:" + TEST_HASH.hex().upper())
    assert master.workchain == -1
    assert master.to_bytes() == b"\xff\xff\xff\xff" + TEST_HASH

    print("PASSED: Raw addresses parse")
    return True


def test_format_roundtrip():
    """Test that formatting reproduces known addresses"""
    print("\nTEST: Address Formatting")

    account = AccountId(0, TEST_HASH)
    assert format_address(account, bounceable=False) == TEST_ADDRESS
    assert format_address(account) == TEST_BOUNCEABLE

    testnet = format_address(AccountId(-1, TEST_HASH), test_only=True, url_safe=False)
    assert parse_address(testnet) == AccountId(-1, TEST_HASH)

    print("PASSED: Formatting round-trips")
    return True


def test_malformed_addresses():
    """Test rejection of malformed address text"""
    print("\nTEST: Malformed Addresses")

    _expect_address_error("")
    _expect_address_error("not an address")
    _expect_address_error("0:" + "ab" * 31)
    _expect_address_error("0:" + TEST_HASH.hex() + "\n")
    # Flip one character so the checksum no longer matches
    _expect_address_error(TEST_ADDRESS[:10] + ("A" if TEST_ADDRESS[10] != "A" else "B") + TEST_ADDRESS[11:])
    # Right length, not base64
    _expect_address_error("!" * 48)
    # Unknown tag byte
    _expect_address_error(format_address(AccountId(0, TEST_HASH)).replace("E", "A", 1))
    # Standard and url-safe alphabets in one address
    err = _expect_address_error(TEST_ADDRESS.replace("-", "+", 1))
    assert "mixes" in str(err)
    _expect_address_error(TEST_ADDRESS.replace("_", "/", 1))

    print("PASSED: Malformed addresses are rejected")
    return True


def test_account_id_validation():
    """Test AccountId field checks"""
    print("\nTEST: AccountId Validation")

    for args in [(0, b"\x00" * 31), (2**31, TEST_HASH)]:
        try:
            AccountId(*args)
        except AddressError:
            continue
        raise AssertionError(f"AccountId{args!r} was accepted")

    print("PASSED: AccountId validates its fields")
    return True


def run_all_address_tests():
    """Run all address tests"""
    print("\n" + "="*80)
    print("RUNNING ADDRESS UNIT TESTS")
    print("="*80)

    tests = [
        test_parse_friendly,
        test_parse_raw,
        test_format_roundtrip,
        test_malformed_addresses,
        test_account_id_validation
    ]

    results = []
    for test_func in tests:
        try:
            result = test_func()
            results.append((test_func.__name__, result))
        except Exception as e:
            print(f"FAILED: {e}")
            import traceback
            traceback.print_exc()
            results.append((test_func.__name__, False))

    print("\n" + "="*80)
    print("ADDRESS TEST SUMMARY")
    print("="*80)

    for name, result in results:
        status = "PASSED" if result else "FAILED"
        print(f"{status}: {name}")

    if all(r for _, r in results):
        print("\nALL ADDRESS TESTS PASSED!")
        return 0
    else:
        print("\nSOME TESTS FAILED")
        return 1

if __name__ == "__main__":
    exit_code = run_all_address_tests()
    sys.exit(exit_code)
