# pirkit

Small tools for exercising a private information retrieval (PIR) service in tests and benchmarks. It has no dependencies outside the standard library.

## Modules

- **`pirkit.datagen`**: `DataGenerator` writes the test data.
  - The server CSV (`pir_server_data_<server_num>.csv`) has an `id` column of zero-padded twelve-digit ids. Each label column holds an 8-byte random label in hex. The same label is repeated across the columns of a row.
  - The client CSV (`pir_client_data_<server_num>_<client_num>.csv`) lists ids to query. Each id is picked with probability `query_rate` from a fixed-seed generator. The list is then topped up with the first ids of the table until it holds at least `query_num` ids. If that needs more ids than the table has, `ValueError` is raised.
  - With `use_cache=True` and an existing server file, nothing is written. The ids are read back from that file instead.
  - `check_ids(result)` tells whether every id in `result` is in the server table.
  - `server_path` and `client_paths` give the file locations.
- **`pirkit.parties`**: builds the `host:port` list for a multi-party link.
  - `create_parties(test_local, config, self_rank, ips)` takes a `PartyConfig` (`self_port`, `other_port`, `gateway_port`, `proxy_mode`).
  - `ProxyMode.NONE` sends peers directly to `ip:other_port`.
  - `ProxyMode.GATEWAY` routes every peer through `ips[self_rank]:gateway_port`.
  - This party always listens on `0.0.0.0:self_port`.
  - Local test mode uses consecutive loopback ports from `LOCAL_BASE_PORT` (60021).
  - A rank outside `ips` raises `IndexError`.
  - The module also defines the `STATUS_OK` (200) and `STATUS_ERROR_DEFAULT` (201) constants.
- **`pirkit.jsonutil`**: `json_from_file` and `json_to_file` load and save JSON; saved files are indented by four spaces. There are also lookups that fall back to a default:
  - `json_get_string` returns the value only if it is a string.
  - `json_get_int` returns any number truncated to an int.
  - `json_get_int_no_cast` returns the value only if it is already an integer.
  - Booleans never count as numbers.
- **`pirkit.fileutil`**: plain text files with one entry per line.
  - `vec_to_file(data, path)` replaces the file with the given lines.
  - `vec_from_file(path)` reads the lines back without their line endings.
  - `str_to_file(data, path)` appends the file-name part of `data` unless that name is already listed, and returns whether it added a line.

## Installation

```
pip install pirkit
```

To run the test suite:

```
pip install "pirkit[test]"
pytest
```

## Examples

```python
from pirkit.datagen import DataGenerator

gen = DataGenerator(10000, 1, 10, 10 / 10000, "/tmp/pir")
gen.server_name            # 'pir_server_data_10000.csv'
gen.client_names           # ['pir_client_data_10000_1.csv']
gen.check_ids(["000000000042"])   # True
```

```python
from pirkit.parties import PartyConfig, ProxyMode, create_parties

config = PartyConfig(self_port=12600, other_port=12600, gateway_port=12000,
                     proxy_mode=ProxyMode.NONE)
create_parties(False, config, 0, ["10.0.0.1", "10.0.0.2"])
# '0.0.0.0:12600,10.0.0.2:12600'
create_parties(True, config, 0, ["10.0.0.1", "10.0.0.2"])
# '127.0.0.1:60021,127.0.0.1:60022'
```

```python
from pirkit.jsonutil import json_get_int, json_get_int_no_cast, json_get_string

doc = {"pi": 3.141, "hello": "hello world"}
json_get_int(doc, "pi", -1)          # 3
json_get_int_no_cast(doc, "pi", -1)  # -1
json_get_string(doc, "pi")           # ''
```

```python
from pirkit.fileutil import str_to_file, vec_from_file

str_to_file("/data/sets/a.csv", "/tmp/names.txt")   # True
str_to_file("/other/a.csv", "/tmp/names.txt")       # False, already listed
vec_from_file("/tmp/names.txt")                     # ['a.csv']
```

## What it does not do

pirkit does not talk to a PIR service itself. It has no HTTP client or callback server, and it does not drive setup, server or client requests. It also has none of the following:

- timing or result-report collection for those requests;
- a way to upload data sets to, or download them from, an experiment-tracking server;
- a command-line entry point.