# quickhttp

HTTP request method names and response status codes, together with the
standard reason phrase for each status code. Everything lives in the
`quickhttp.status` module.

## Installation

```
pip install quickhttp
```

## Usage

### Methods

`Method` is a string enumeration (`StrEnum`) of the HTTP request methods.
Its members compare equal to their plain string values:

```python
from quickhttp.status import Method

Method.GET == "GET"      # True
Method("PATCH")          # Method.PATCH
```

Members: `GET`, `HEAD`, `POST`, `PUT`, `PATCH`, `DELETE`, `CONNECT`,
`OPTIONS`, `TRACE`.

### Status codes

`Status` is an integer enumeration (`IntEnum`) of the status codes
registered with IANA, from `CONTINUE` (100) to
`NETWORK_AUTHENTICATION_REQUIRED` (511). Code 306 is unused and has no
member. Each member returns its reason phrase from `text()`:

```python
from quickhttp.status import Status

Status.OK == 200            # True
Status(404)                 # Status.NOT_FOUND
Status.NOT_FOUND.text()     # "Not Found"
Status.TEAPOT.text()        # "I'm a teapot"
```

Looking up an unregistered code with `Status(code)` raises `ValueError`, as
for any enumeration.

### Reason phrases for plain integers

`status_text` takes any integer and returns its reason phrase, or an empty
string for a code it does not know:

```python
from quickhttp.status import status_text

status_text(200)  # "OK"
status_text(404)  # "Not Found"
status_text(500)  # "Internal Server Error"
status_text(999)  # ""
```

## What this package does not do

It holds only names, codes and reason phrases. It has no HTTP server, no
routing, no request or response objects, no form or file-upload handling
and no test client.

## Running the tests

```
pip install -e ".[test]"
pytest
```