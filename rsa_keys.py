"""
Description: RSA key generation on top of the NaturalNumber primality utilities, with PEM export/import.
Author: Thomas Dang
Date: 17-Oct-2026

Notes:
    - Primes are found by drawing a random d-digit start value and searching for the next likely prime from there.
    - Keys are handed to `cryptography` as raw numbers, so they can be serialised and loaded like any other RSA key.
"""
from __future__ import annotations

import os
import secrets

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes, PublicKeyTypes

from natural_number import NaturalNumber
from number_theory import UniformSource, random_number, reduce_to_gcd
from primality import generate_next_likely_prime

DEFAULT_PUBLIC_EXPONENT: int = 65537
DEFAULT_PRIME_DIGITS: int = 155  # ~512-bit primes, ~1024-bit modulus
MIN_PRIME_DIGITS: int = 40  # keeps the modulus well above the public exponent
# A product of two MIN_PRIME_DIGITS-digit primes has at least this many digits
MIN_MODULUS_DIGITS: int = 2 * MIN_PRIME_DIGITS - 1


class KeyLoadingError(Exception):
    """
    Exception raised when loading an RSA key fails.
    """
    pass


def check_modulus_size(modulus: int, path: str) -> None:
    """
    Reject a loaded key whose modulus is shorter than any key this module would generate.

    Args:
        modulus (int): The RSA modulus n of the loaded key.
        path (str): The file the key came from (for the error message).

    Raises:
        KeyLoadingError: If n has fewer than MIN_MODULUS_DIGITS decimal digits.
    """
    digits: int = len(str(modulus))
    if digits < MIN_MODULUS_DIGITS:
        raise KeyLoadingError(
            f"RSA modulus in '{path}' has {digits} digits, at least {MIN_MODULUS_DIGITS} are required"
        )


def random_number_with_digits(digits: int, rng: UniformSource) -> NaturalNumber:
    """
    Draw a number uniformly from all numbers with exactly `digits` decimal digits, i.e. [10^(digits-1), 10^digits - 1].

    Args:
        digits (int): Number of decimal digits, at least 1.
        rng (UniformSource): Random source.

    Returns:
        NaturalNumber: The random number.

    Raises:
        ValueError: If digits is less than 1.
    """
    if digits < 1:
        raise ValueError("A number must have at least 1 digit.")

    lowest: int = 10 ** (digits - 1)
    # Offset above the lowest value, in [0, 9 * 10^(digits-1) - 1]
    span: NaturalNumber = NaturalNumber(9 * lowest - 1)
    result: NaturalNumber = random_number(span, rng)
    result.add(NaturalNumber(lowest))
    return result


def generate_rsa_prime(digits: int, public_exponent: int, rng: UniformSource) -> int:
    """
    Generate a likely prime p with exactly `digits` decimal digits and gcd(public_exponent, p - 1) = 1.

    The algorithm repeatedly:
        1) Draws a random start value with `digits` digits.
        2) Moves it up to the next likely prime.
        3) Keeps the prime if it still has `digits` digits and p - 1 is coprime to the public exponent
           (otherwise there is no private exponent), else goes back to (1).

    Args:
        digits (int): Number of decimal digits of the prime, at least MIN_PRIME_DIGITS.
        public_exponent (int): The RSA public exponent e.
        rng (UniformSource): Random source for start values and witnesses.

    Returns:
        int: The prime.
    """
    while True:
        candidate: NaturalNumber = random_number_with_digits(digits, rng)
        generate_next_likely_prime(candidate, rng)

        # The search may have run past the largest `digits`-digit number
        if len(str(candidate)) != digits:
            continue

        # gcd(e, p - 1) must be 1
        gcd_value: NaturalNumber = NaturalNumber(public_exponent)
        p_minus_one: NaturalNumber = NaturalNumber(candidate)
        p_minus_one.decrement()
        reduce_to_gcd(gcd_value, p_minus_one)
        if gcd_value == 1:
            return candidate.to_int()


def modular_inverse(a: int, m: int) -> int:
    """
    Compute the inverse of a modulo m.

    Args:
        a (int): The number to invert.
        m (int): The modulus, m > 1.

    Returns:
        int: x in [0, m-1] with a * x = 1 (mod m).

    Raises:
        ValueError: If a has no inverse modulo m (gcd(a, m) != 1).
    """
    try:
        return pow(a, -1, m)
    except ValueError as e:
        raise ValueError(f"{a} has no inverse modulo {m}") from e


def generate_rsa_private_key(
    prime_digits: int = DEFAULT_PRIME_DIGITS,
    public_exponent: int = DEFAULT_PUBLIC_EXPONENT,
    rng: UniformSource | None = None,
) -> rsa.RSAPrivateKey:
    """
    Generate an RSA private key from two distinct likely primes with `prime_digits` digits each.

    The private exponent is d = e^-1 mod lcm(p-1, q-1), and the CRT values are derived from d, p and q.

    Args:
        prime_digits (int, optional): Decimal digits of each prime. Defaults to DEFAULT_PRIME_DIGITS.
        public_exponent (int, optional): Odd public exponent e >= 3. Defaults to 65537.
        rng (UniformSource | None, optional): Random source. Defaults to secrets.SystemRandom().

    Returns:
        rsa.RSAPrivateKey: The generated key.

    Raises:
        ValueError: If prime_digits is below MIN_PRIME_DIGITS or the public exponent is not odd and >= 3.
    """
    if prime_digits < MIN_PRIME_DIGITS:
        raise ValueError(f"Primes must have at least {MIN_PRIME_DIGITS} digits.")
    if public_exponent < 3 or public_exponent % 2 == 0:
        raise ValueError("Public exponent must be odd and at least 3.")

    if rng is None:
        rng = secrets.SystemRandom()
        #? used secrets.SystemRandom() by default for key material (OS randomness), tests pass a seeded random.Random

    p: int = generate_rsa_prime(prime_digits, public_exponent, rng)
    q: int = p
    while q == p:
        q = generate_rsa_prime(prime_digits, public_exponent, rng)

    # lambda(n) = lcm(p-1, q-1) = (p-1)(q-1) / gcd(p-1, q-1)
    gcd_value: NaturalNumber = NaturalNumber(p - 1)
    reduce_to_gcd(gcd_value, NaturalNumber(q - 1))
    carmichael: int = (p - 1) * (q - 1) // gcd_value.to_int()

    d: int = modular_inverse(public_exponent, carmichael)

    private_numbers: rsa.RSAPrivateNumbers = rsa.RSAPrivateNumbers(
        p=p,
        q=q,
        d=d,
        dmp1=rsa.rsa_crt_dmp1(d, p),
        dmq1=rsa.rsa_crt_dmq1(d, q),
        iqmp=rsa.rsa_crt_iqmp(p, q),
        public_numbers=rsa.RSAPublicNumbers(e=public_exponent, n=p * q),
    )
    return private_numbers.private_key()


def setup_rsa_keypair(
    identity: str,
    priv_path: str,
    pub_path: str,
    prime_digits: int = DEFAULT_PRIME_DIGITS,
    rng: UniformSource | None = None,
) -> rsa.RSAPrivateKey:
    """
    Generate an RSA keypair and save it to files as PEM-serialised bytes.

    The private key is saved to `priv_path` in PKCS#8 format with no encryption.
    The public key is derived from the private key and saved to `pub_path` in
    SubjectPublicKeyInfo format.

    Args:
        identity (str): Identifier for the key owner (for logging).
        priv_path (str): Path to write the private key PEM (chmod 600).
        pub_path (str): Path to write the public key PEM (chmod 644).
        prime_digits (int, optional): Decimal digits of each prime. Defaults to DEFAULT_PRIME_DIGITS.
        rng (UniformSource | None, optional): Random source. Defaults to secrets.SystemRandom().

    Returns:
        rsa.RSAPrivateKey: The generated private key.
    """
    # Generate, serialise private key, and save to file
    private_key: rsa.RSAPrivateKey = generate_rsa_private_key(prime_digits, rng=rng)
    priv_bytes: bytes = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption()
    )
    with open(priv_path, 'wb') as f:
        f.write(priv_bytes)
    os.chmod(priv_path, 0o600)  # read/write for owner only

    # Public key is derived from the private key
    pub_bytes: bytes = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo
    )
    with open(pub_path, 'wb') as f:
        f.write(pub_bytes)
    os.chmod(pub_path, 0o644)  # read for all, write for owner only

    print(f"[INFO] {identity} RSA keys generated ({private_key.key_size}-bit modulus): {priv_path}, {pub_path}")
    return private_key


def load_rsa_private_key(priv_path: str) -> rsa.RSAPrivateKey:
    """
    Load an RSA private key from a PEM file (PKCS#8, unencrypted).

    Args:
        priv_path (str): Path to the private key PEM file.

    Returns:
        rsa.RSAPrivateKey: The loaded key.

    Raises:
        KeyLoadingError: If the file can't be read, isn't a valid RSA private key, or its modulus is too short.
    """
    try:
        with open(priv_path, "rb") as f:
            key_data: bytes = f.read()
    except OSError as e:
        raise KeyLoadingError(f"Cannot find or open private key file '{priv_path}': {e}") from e

    try:
        private_key: PrivateKeyTypes = serialization.load_pem_private_key(key_data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        raise KeyLoadingError(f"Invalid private key in '{priv_path}': {e}") from e

    if not isinstance(private_key, rsa.RSAPrivateKey):
        raise KeyLoadingError(f"Loaded key is not an RSAPrivateKey in '{priv_path}'")
    check_modulus_size(private_key.private_numbers().public_numbers.n, priv_path)

    return private_key


def load_rsa_public_key(pub_path: str) -> rsa.RSAPublicKey:
    """
    Load an RSA public key from a PEM file (SubjectPublicKeyInfo).

    Args:
        pub_path (str): Path to the public key PEM file.

    Returns:
        rsa.RSAPublicKey: The loaded key.

    Raises:
        KeyLoadingError: If the file can't be read, isn't a valid RSA public key, or its modulus is too short.
    """
    try:
        with open(pub_path, "rb") as f:
            key_data: bytes = f.read()
    except OSError as e:
        raise KeyLoadingError(f"Cannot find or open public key file '{pub_path}': {e}") from e

    try:
        public_key: PublicKeyTypes = serialization.load_pem_public_key(key_data)
    except (ValueError, UnsupportedAlgorithm) as e:
        raise KeyLoadingError(f"Invalid public key in '{pub_path}': {e}") from e

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyLoadingError(f"Loaded key is not an RSAPublicKey in '{pub_path}'")
    check_modulus_size(public_key.public_numbers().n, pub_path)

    return public_key
