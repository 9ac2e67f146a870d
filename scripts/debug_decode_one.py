import sys

from aisdecode import CSV_FIELDS, DecodeError, decode, inspect
from aisdecode.armor import decode_armor
from aisdecode.sentence import extract_payload

line = sys.argv[1] if len(sys.argv) > 1 else "!AIVDM,1,1,,A,38IFDN0Ohj7JvbN0fABtpbJ401w@,0*69"
payload = extract_payload(line)
print("payload", payload)
if payload is None:
    sys.exit(1)
bits = decode_armor(payload)
print("bits", "".join(str(int(b)) for b in bits))
for key, value in inspect(line).items():
    print(key, value)
try:
    m = decode(line)
except DecodeError as e:
    print("decode failed:", e.reason, e)
    sys.exit(1)
for key, value in zip(CSV_FIELDS, m.as_row()):
    print(key, value)
