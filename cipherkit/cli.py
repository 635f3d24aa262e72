#!/usr/bin/env python3
import argparse
import binascii
import sys

from . import keygen
from .affine import affine_decrypt, affine_encrypt
from .analysis import count_cipher_frequencies, index_of_coincidence
from .display import (format_affine_table, format_matrix, format_playfair_square,
                      format_vigenere_tables)
from .errors import CipherError
from .hill import hill_decrypt, hill_encrypt, parse_hill_key
from .matrix import invert_matrix
from .playfair import PlayfairCipher
from .super_encryption import DEFAULT_COLUMNS, super_decrypt, super_encrypt
from .vigenere import (autokey_decrypt, autokey_encrypt, extended_decrypt,
                       extended_encrypt, vigenere_decrypt, vigenere_encrypt)

# ===============================
# Helpers
# ===============================

def hex_to_bytes(s: str) -> bytes:
    try:
        return binascii.unhexlify(''.join(s.split()))
    except (binascii.Error, ValueError):
        raise ValueError("Invalid hex string") from None


def bytes_to_hex(b: bytes) -> str:
    return binascii.hexlify(b).decode()


def to_bytes_inline(data: str, encoding: str) -> bytes:
    enc = encoding.lower()
    if enc in ("utf8", "utf-8"):
        return data.encode("utf-8")
    elif enc == "hex":
        return hex_to_bytes(data)
    else:
        raise ValueError("encoding must be utf8 or hex for inline data")


def print_frequencies(text: str) -> None:
    print("\nCipher Letter Frequencies (most common first):")
    for letter, count in count_cipher_frequencies(text):
        print(f"{letter}: {count}")
    print(f"Index of coincidence: {index_of_coincidence(text):.4f}")


# ===============================
# Commands
# ===============================

def run_vigenere(args):
    if args.show:
        print(format_vigenere_tables(args.key), end="\n\n")
    if args.decrypt:
        return vigenere_decrypt(args.text, args.key)
    return vigenere_encrypt(args.text, args.key)


def run_autokey(args):
    if args.decrypt:
        return autokey_decrypt(args.text, args.key)
    return autokey_encrypt(args.text, args.key)


def run_playfair(args):
    cipher = PlayfairCipher(args.key)
    if args.show:
        print("Key square:")
        print(format_playfair_square(cipher.matrix), end="\n\n")
    if args.decrypt:
        return cipher.decrypt(args.text)
    return cipher.encrypt(args.text)


def run_affine(args):
    if args.decrypt:
        result = affine_decrypt(args.text, args.a, args.b)
    else:
        result = affine_encrypt(args.text, args.a, args.b)
    if args.show:
        print("Affine Cipher Key Mapping:")
        print(format_affine_table(args.a, args.b), end="\n\n")
    return result


def run_hill(args):
    matrix = parse_hill_key(args.matrix)
    if args.decrypt:
        result = hill_decrypt(args.text, matrix)
    else:
        result = hill_encrypt(args.text, matrix)
    if args.show:
        print("Key Matrix:")
        print(format_matrix(matrix))
        if args.decrypt:
            print("\nInverse Key Matrix:")
            print(format_matrix(invert_matrix(matrix)))
        print()
    return result


def run_bytes(args, encrypt, decrypt):
    in_enc = args.in_enc or ("hex" if args.decrypt else "utf8")
    data = to_bytes_inline(args.text, in_enc)
    key = to_bytes_inline(args.key, args.key_enc)
    if not args.decrypt:
        return bytes_to_hex(encrypt(data, key))
    pt = decrypt(data, key)
    if args.print_utf8:
        try:
            return pt.decode("utf-8")
        except UnicodeDecodeError:
            print("Plaintext is not valid UTF-8; showing hex.", file=sys.stderr)
    return bytes_to_hex(pt)


def run_extended(args):
    return run_bytes(args, extended_encrypt, extended_decrypt)


def run_super(args):
    return run_bytes(
        args,
        lambda data, key: super_encrypt(data, key, args.columns),
        lambda data, key: super_decrypt(data, key, args.columns),
    )


def run_keygen(args):
    if args.kind in ("vigenere", "autokey", "playfair"):
        return keygen.random_letter_key(args.length or 8)
    if args.kind in ("extended", "super"):
        return bytes_to_hex(keygen.random_byte_key(args.length or 16))
    if args.kind == "affine":
        a, b = keygen.random_affine_key()
        return f"a={a} b={b}"
    matrix = keygen.random_hill_key(args.size)
    return ";".join(",".join(str(n) for n in row) for row in matrix)


def run_visual(args):
    # imported lazily: numpy / Pillow / matplotlib are only needed here
    from .visual import visualize
    key = to_bytes_inline(args.key, args.key_enc)
    visualize(args.image, key, args.mode, args.columns, args.out)
    return None


# ===============================
# CLI
# ===============================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="cipherkit",
        description="Classical ciphers: Vigenere, Auto-Key, Extended Vigenere, Playfair, Affine, Hill, Super Encryption"
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_common(sp, letters=True):
        sp.add_argument("text", help="Input text")
        sp.add_argument("--decrypt", action="store_true", help="Decrypt instead of encrypt")
        if letters:
            sp.add_argument("--freq", action="store_true",
                            help="Print letter frequencies of the result")

    def add_show(sp, what):
        sp.add_argument("--show", action="store_true", help=f"Print the {what}")

    vig = sub.add_parser("vigenere", help="Vigenere cipher (mod 26)")
    add_common(vig)
    vig.add_argument("--key", required=True, help="Keyword (letters)")
    add_show(vig, "shift table of every key letter")
    vig.set_defaults(func=run_vigenere)

    auto = sub.add_parser("autokey", help="Auto-Key Vigenere cipher")
    add_common(auto)
    auto.add_argument("--key", required=True, help="Primer keyword (letters)")
    auto.set_defaults(func=run_autokey)

    pf = sub.add_parser("playfair", help="Playfair cipher (5x5 square, J=I)")
    add_common(pf)
    pf.add_argument("--key", required=True, help="Key string for the 5x5 square")
    add_show(pf, "key square")
    pf.set_defaults(func=run_playfair)

    aff = sub.add_parser("affine", help="Affine cipher (a*x + b) mod 26")
    add_common(aff)
    aff.add_argument("--a", type=int, default=1, help="Multiplier, coprime with 26 (default: 1)")
    aff.add_argument("--b", type=int, default=0, help="Shift (default: 0)")
    add_show(aff, "letter mapping table")
    aff.set_defaults(func=run_affine)

    hill = sub.add_parser("hill", help="Hill cipher with a 2x2 or 3x3 key matrix")
    add_common(hill)
    hill.add_argument("--matrix", required=True,
                      help="Key matrix, row-major integers, e.g. '3,3;2,5' or '3 3 2 5'")
    add_show(hill, "key matrix (and its inverse when decrypting)")
    hill.set_defaults(func=run_hill)

    for name, helptext, func in (
        ("extended", "Extended Vigenere over bytes (mod 256)", run_extended),
        ("super", "Extended Vigenere followed by columnar transposition", run_super),
    ):
        sp = sub.add_parser(name, help=helptext)
        add_common(sp, letters=False)
        sp.add_argument("--key", required=True, help="Key (inline; utf8/hex depending on --key-enc)")
        sp.add_argument("--key-enc", choices=["utf8", "hex"], default="utf8",
                        help="Encoding for --key (default: utf8)")
        sp.add_argument("--in-enc", choices=["utf8", "hex"],
                        help="Encoding for TEXT (default: utf8 to encrypt, hex to decrypt)")
        sp.add_argument("--print-utf8", action="store_true",
                        help="Print decrypted bytes as UTF-8 instead of hex")
        if name == "super":
            sp.add_argument("--columns", type=int, default=DEFAULT_COLUMNS,
                            help=f"Number of transposition columns (default: {DEFAULT_COLUMNS})")
        sp.set_defaults(func=func)

    kg = sub.add_parser("keygen", help="Generate a random key")
    kg.add_argument("kind", choices=["vigenere", "autokey", "extended", "playfair",
                                     "affine", "hill", "super"])
    kg.add_argument("--length", type=int, help="Key length (letters or bytes)")
    kg.add_argument("--size", type=int, default=2, choices=[2, 3], help="Hill matrix size")
    kg.set_defaults(func=run_keygen)

    vis = sub.add_parser("visual", help="Encrypt a grayscale image and show it next to the original")
    vis.add_argument("image", help="Path to an image file (JPG, PNG, BMP)")
    vis.add_argument("--key", required=True)
    vis.add_argument("--key-enc", choices=["utf8", "hex"], default="utf8")
    vis.add_argument("--mode", choices=["extended", "super"], default="extended")
    vis.add_argument("--columns", type=int, default=DEFAULT_COLUMNS)
    vis.add_argument("--out", help="Save the figure to this file instead of opening a window")
    vis.set_defaults(func=run_visual)

    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    try:
        result = args.func(args)
    except (CipherError, ValueError, OSError) as e:
        print("Error:", e, file=sys.stderr)
        return 1

    if result is not None:
        print(result)
        if getattr(args, "freq", False):
            print_frequencies(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
