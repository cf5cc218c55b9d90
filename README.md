# ferrofix

Reusable pieces for producing and consuming FIX (Financial Information
eXchange) data. It has no third-party dependencies.

## What is included

- `ferrofix.sofh.frame`: `Frame`, a Simple Open Framing Header frame
  (a 16-bit encoding type plus a payload). `Frame.decode` reads a frame
  from the start of a byte string. `Frame.to_bytes` and
  `Frame.encode(writer)` write one.
- `ferrofix.sofh.errors`: `SofhError` and its subclasses
  `IncompleteError` (with a `needed` byte count),
  `InvalidMessageLengthError` and `SofhIOError`.
- `ferrofix.models.fix_message`: `FixMessage`, which stores fields by tag
  in insertion order and rejects duplicate tags with `DuplicateFieldError`.
  Field values are `FieldValue` objects tagged with a `FieldKind`: string,
  int, char, boolean or group.
- `ferrofix.session.seq_numbers`: `SeqNumbers` tracks the next inbound and
  outbound sequence numbers. `validate_inbound` raises `SeqNumberTooLow`
  or `SeqNumberRecover`, both subclasses of `SeqNumberError`. The module
  also defines `ResendRequestRange`.
- `ferrofix.session.errs`: builders for standard `Text(58)` strings, such
  as `msg_seq_num`, `missing_field`, `production_env` and the heartbeat
  messages.
- `ferrofix.json.config`: `Config`, a settings object with a
  `pretty_print` flag that is off by default.
- `ferrofix.fixs.iana2openssl`: the `IANA_TO_OPENSSL` mapping and
  `to_openssl(name)`.
- `ferrofix.fixs.version`: `Version.V1_DRAFT`. It lists the recommended
  ciphersuites in IANA form (`recommended_cs_iana`) and in OpenSSL form
  (`recommended_cs_openssl`). It also builds `ssl.SSLContext` objects for
  clients (`recommended_connector_context`) and servers
  (`recommended_acceptor_context`). These contexts are limited to TLS 1.1
  through 1.2, have compression turned off, and use the recommended
  cipher list.
- `ferrofix.tags.fix40`, `ferrofix.tags.fix41`, `ferrofix.tags.fix42`:
  tag number constants, for example `MSG_TYPE = 35`.

## Installation

```
pip install ferrofix
```

To also install what the test suite needs:

```
pip install "ferrofix[test]"
```

## Examples

Framing a payload with SOFH and decoding it again:

```python
from ferrofix.sofh.frame import Frame
from ferrofix.sofh.errors import IncompleteError

data = Frame(0xF500, b"{}").to_bytes()
assert data == b"\x00\x00\x00\x08\xf5\x00{}"
assert Frame.decode(data).message == b"{}"

try:
    Frame.decode(data[:5])
except IncompleteError as err:
    print(err.needed)  # 1
```

Building a message and reading fields back:

```python
from ferrofix.models.fix_message import FixMessage
from ferrofix.tags import fix42 as tags

msg = FixMessage()
msg.add_str(tags.MSG_TYPE, "0")
msg.add_i64(tags.MSG_SEQ_NUM, 1)
assert msg.f_msg_type() == "0"
assert msg.field_i64(tags.MSG_SEQ_NUM) == 1
```

Checking an inbound sequence number:

```python
from ferrofix.session.seq_numbers import SeqNumbers, SeqNumberRecover
from ferrofix.session import errs

seq = SeqNumbers()
seq.validate_inbound(1)
try:
    seq.validate_inbound(5)
except SeqNumberRecover:
    print(errs.msg_seq_num(seq.next_inbound))
```

Listing the FIXS ciphersuites in OpenSSL form:

```python
from ferrofix.fixs.version import Version

print(":".join(Version.V1_DRAFT.recommended_cs_openssl(False)))
```

## What it does not do

- There is no session engine. Nothing handles logons or heartbeats, times
  out connections, or answers resend requests. You get the sequence
  number tracking and reject texts, and you write the message flow
  yourself.
- There is no streaming SOFH reader. `Frame.decode` works on bytes that
  you have already read and buffered.
- There is no JSON codec for FIX messages. `Config` only holds settings.
- There is no tag-value encoder or decoder, no FIX dictionary, and no
  network transport.