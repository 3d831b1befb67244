"""
vigenere_engine — Live Demo: every alphabet kind
=================================================
Run:  python examples/demo_engine.py

Encodes and decodes a message under each built-in universe and a custom
one, then shows strict mode and the error taxonomy at work.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_engine import VigenereCipher, VigenereError, available_kinds

LINE = "═" * 70

SAMPLES = {
    "numbers":      ("4815162342", "1234"),
    "lowercase":    ("attack at dawn", "lemon"),
    "uppercase":    ("ATTACK AT DAWN", "LEMON"),
    "symbols":      ("<{[(!?)]}>", "#$%"),
    "base64":       ("SGVsbG8sIFdvcmxkIQ==", "S3cret+/"),
    "alphanumeric": ("Meet at Pier 39", "Key42"),
    "ascii":        ("Meet at Pier 39, 10:00pm!", "p@ss w0rd"),
}

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def fail(label, err):
    print(f"  ✗  {label}: {type(err).__name__}: {err}")

logging.basicConfig(level=logging.INFO, format=' %(name)s %(message)s')

print(f"\n{LINE}")
print("  vigenere_engine — Demo")
print(f"  Kinds: {', '.join(available_kinds())}")
print(LINE)

for kind, (msg, secret) in SAMPLES.items():
    header(kind)
    v  = VigenereCipher(type=kind, secret=secret)
    ct = v.encode(msg)
    pt = v.decode(ct)
    ok("Universe",  f"{len(v.universe)} symbols")
    ok("Plaintext", msg)
    ok("Encoded",   ct)
    ok("Decoded",   pt)
    assert pt == msg

header("custom — Greek")
v  = VigenereCipher(type="custom", characters="αβγδεζηθικλμνξοπρστυφχψω", secret="κλειδι")
ct = v.encode("καλημερα κοσμε")
ok("Encoded", ct)
ok("Decoded", v.decode(ct))

header("strict mode and errors")
strict = VigenereCipher(type="lowercase", strict=True)
for label, call in [
    ("strict, '!' in message", lambda: strict.encode("hello!", "key")),
    ("uppercase in secret",    lambda: strict.encode("hello", "Key")),
    ("no secret",              lambda: strict.encode("hello")),
    ("unknown kind",           lambda: VigenereCipher(type="klingon")),
    ("custom, no characters",  lambda: VigenereCipher(type="custom")),
]:
    try:
        call()
        ok(label, "accepted")
    except VigenereError as e:
        fail(label, e)

print(f"\n{LINE}\n")
