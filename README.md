# cpr

This package provides the pieces used to describe an HTTP request and to hold
its result. It has no dependencies outside the standard library.

| Module | What it provides |
| --- | --- |
| `cpr.types` | `StringHolder`, `Url`, `Interface`, `Header` (a mapping whose keys ignore case), `case_insensitive_less` |
| `cpr.encoding` | `url_encode`, `url_decode` |
| `cpr.containers` | `Parameter`, `Parameters` (query strings), `Pair`, `Payload` (form bodies), `Buffer` (in-memory file upload) |
| `cpr.cookies` | `Cookie`, `Cookies` |
| `cpr.auth` | `AuthMode`, `Authentication`, `Bearer` |
| `cpr.accept_encoding` | `AcceptEncodingMethods`, `AcceptEncoding` |
| `cpr.options` | `LocalPort`, `LowSpeed`, `Range`, `MultiRange`, `ReserveSize`, `Proxies` |
| `cpr.callbacks` | `ReadCallback`, `HeaderCallback`, `WriteCallback`, `ProgressCallback`, `DebugCallback` with `InfoType`, `CancellationCallback` |
| `cpr.errors` | `ErrorCode`, `Error`, `error_code_for_curl_error` |
| `cpr.response` | `Response`, `CertInfo` |
| `cpr.asyncs` | `AsyncWrapper`, `CancellationResult`, `submit`, `startup`, `cleanup` |

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Examples

### Headers

Header names ignore ASCII case. Iteration sorts the keys without regard to case
and returns each key as it was first written:

```python
from cpr.types import Header

header = Header({"Content-Type": "application/json"})
assert header["content-type"] == "application/json"
header["CONTENT-TYPE"] = "text/plain"
assert list(header) == ["Content-Type"]
```

### Query strings and form bodies

`Parameters` and `Payload` accept tuples or item objects. Keys with an empty
value are written without `=`. Both classes URL-encode values unless you set
`encode = False`. `Parameters` also encodes its keys.

```python
from cpr.containers import Parameters, Payload

params = Parameters(("key", "value"), ("hello", "world"))
params.add(("test", "case"))
assert params.content() == "key=value&hello=world&test=case"
assert Parameters(("key", "")).content() == "key"

assert Payload(("x", 5), ("msg", "a b")).content() == "x=5&msg=a%20b"
```

### Cookies

Encoding is on by default. A value that is wrapped in double quotes is sent as
it is:

```python
from cpr.cookies import Cookie, Cookies

cookies = Cookies([Cookie("SID", "token"), Cookie("lang", "en-US")], encode=False)
assert cookies.get_encoded() == "SID=token; lang=en-US; "
assert Cookie("a", "b").expires_string() == "Thu, 01 Jan 1970 00:00:00 GMT"
```

### Authentication

```python
from cpr.auth import Authentication, AuthMode, Bearer

password = "password"
auth = Authentication("user", password, AuthMode.BASIC)
assert auth.auth_string == "user:password"
assert Bearer("token").token == "token"
```

### Accept-Encoding

```python
from cpr.accept_encoding import AcceptEncoding, AcceptEncodingMethods

enc = AcceptEncoding(AcceptEncodingMethods.gzip, "deflate")
assert str(enc) == "gzip, deflate"
assert AcceptEncoding(AcceptEncodingMethods.disabled).is_disabled()
```

If `disabled` appears together with any other method, `is_disabled()` raises
`ValueError`.

### Byte ranges

```python
from cpr.options import Range, MultiRange

assert str(Range(None, 3)) == "0-3"
assert str(Range(5)) == "5-"
assert str(MultiRange(Range(None, 3), Range(5, 6))) == "0-3, 5-6"
```

### Errors

```python
from cpr.errors import Error, ErrorCode, error_code_for_curl_error

assert error_code_for_curl_error(6) is ErrorCode.COULDNT_RESOLVE_HOST
assert error_code_for_curl_error(12345) is ErrorCode.UNKNOWN_ERROR
assert not Error()          # an Error is falsy when its code is OK
```

### Cancellation

`CancellationCallback` returns `False` once its `threading.Event` is set. If it
was given a user `ProgressCallback`, it also returns whatever that callback
returns.

```python
import threading
from cpr.callbacks import CancellationCallback

state = threading.Event()
cb = CancellationCallback(state)
assert cb(0, 0, 0, 0) is True
state.set()
assert cb(0, 0, 0, 0) is False
```

### Background work

`submit` runs a function on a shared thread pool and starts the pool if it is
not already running. You can take the result once with `get()`. If you build an
`AsyncWrapper` with a `threading.Event`, you can cancel it.

```python
from cpr.asyncs import startup, submit, cleanup

startup()
result = submit(lambda a, b: a + b, 2, 3)
assert result.get() == 5
cleanup()
```

## What this package does not do

This package does not send requests. It has no session or transfer engine, so
nothing in it opens a connection, performs a GET or POST, or fills in a
`Response`. The option, callback and response types describe a transfer and
hold its result. Performing the transfer is left to the code that uses them.

## Tests

```
pytest
```