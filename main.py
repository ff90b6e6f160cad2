"""
Description: Interactive front-end: sanity check of random_number, then primality checks and RSA key generation on user input.
Author: Thomas Dang
Date: 17-Oct-2026

Notes:
    - Usage: python main.py [seed]
"""
import random
import sys

from natural_number import NaturalNumber
from number_theory import UniformSource, random_number
from primality import generate_next_likely_prime, is_prime1, is_prime2
from rsa_keys import DEFAULT_PRIME_DIGITS, KeyLoadingError, setup_rsa_keypair

# Sanity check of random_number run at startup
HISTOGRAM_BOUND: int = 17
HISTOGRAM_SAMPLES: int = 100000


def random_number_histogram(bound: int, samples: int, rng: UniformSource) -> list[int]:
    """
    Draw `samples` values from random_number([0, bound]) and count how often each value comes up.

    Args:
        bound (int): Top end of the interval, bound > 0.
        samples (int): Number of draws.
        rng (UniformSource): Random source.

    Returns:
        list[int]: counts[i] = number of draws equal to i, for i in [0, bound].
    """
    n: NaturalNumber = NaturalNumber(bound)
    counts: list[int] = [0] * (bound + 1)
    for _ in range(samples):
        value: NaturalNumber = random_number(n, rng)
        assert value <= n, "random_number returned a value above its bound"
        counts[value.to_int()] += 1
    return counts


def check_number(text: str, rng: UniformSource) -> list[str]:
    """
    Check a user-entered number for primality with both tests, and find the next likely prime if it is composite.

    Args:
        text (str): The number, as a decimal string.
        rng (UniformSource): Random source for is_prime2 and the prime search.

    Returns:
        list[str]: The report lines; empty if the number is less than 2.

    Raises:
        ValueError: If text is not a decimal natural number.
    """
    n: NaturalNumber = NaturalNumber(text)
    if n < 2:
        return []

    lines: list[str] = []
    if is_prime1(n):
        lines.append(f"{n} is probably a prime number according to isPrime1.")
    else:
        lines.append(f"{n} is a composite number according to isPrime1.")

    if is_prime2(n, rng):
        lines.append(f"{n} is probably a prime number according to isPrime2.")
    else:
        lines.append(f"{n} is a composite number according to isPrime2.")
        generate_next_likely_prime(n, rng)
        lines.append(f"  next likely prime is {n}")
    return lines


def run_histogram(rng: UniformSource) -> None:
    """Print the startup random_number sanity check."""
    counts: list[int] = random_number_histogram(HISTOGRAM_BOUND, HISTOGRAM_SAMPLES, rng)
    for i, count in enumerate(counts):
        print(f"count[{i}] = {count}")
    print(f"  expected value = {HISTOGRAM_SAMPLES / (HISTOGRAM_BOUND + 1)}")


def check_loop(rng: UniformSource) -> None:
    """Prompt for numbers and report on them, until a number less than 2 is entered."""
    while True:
        text: str = input("n = ").strip()
        try:
            lines: list[str] = check_number(text, rng)
        except ValueError as e:
            print(f"[ERROR] {e}")
            continue
        if not lines:
            print("Bye!")
            return
        for line in lines:
            print(line)


def keygen(rng: UniformSource) -> None:
    """Prompt for an identity and prime size, then write <identity>_priv.pem and <identity>_pub.pem."""
    identity: str = input("Identity: ").strip()
    if not identity:
        print("[ERROR] Identity must not be empty.")
        return
    digits_text: str = input(f"Prime digits [{DEFAULT_PRIME_DIGITS}]: ").strip()
    try:
        prime_digits: int = int(digits_text) if digits_text else DEFAULT_PRIME_DIGITS
        setup_rsa_keypair(
            identity,
            f"{identity}_priv.pem",
            f"{identity}_pub.pem",
            prime_digits=prime_digits,
            rng=rng,
        )
    except (ValueError, KeyLoadingError, OSError) as e:
        print(f"[ERROR] Key generation failed: {e}")


def command_loop(rng: UniformSource) -> None:
    """Simple CLI to check numbers, generate RSA keys, or exit."""
    while True:
        cmd = input("\nCommand (check / keygen / exit): ").strip().lower()
        match cmd:
            case "check":
                check_loop(rng)
            case "keygen":
                keygen(rng)
            case "exit":
                print("[INFO] Exiting.")
                break
            case _:
                print("Unknown command. Use 'check', 'keygen', or 'exit'.")


def main(argv: list[str]) -> int:
    if len(argv) > 2:
        print("Usage: python main.py [seed]")
        return 1
    try:
        seed: int | None = int(argv[1]) if len(argv) == 2 else None
    except ValueError:
        print("Usage: python main.py [seed]")
        return 1

    rng: random.Random = random.Random(seed)
    if seed is not None:
        print(f"[INFO] Using seed {seed}")

    run_histogram(rng)
    command_loop(rng)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
