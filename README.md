# calicoapi

Value types and client-side caching helpers for Calico-style network
policy resources. The package has no dependencies outside the standard
library.

## Value types

Fields in these resources may be written as either a number or a string.
The package parses, validates and serialises them.

- `calicoapi.uint8orstring.Uint8OrString` holds an 8-bit number or a
  string. Its `type` member is a `NumOrStringType` (`NUM` or `STRING`).
  `num_value()` returns the number, converting a string that holds one.
  A JSON string holding a number from 0 to 255 decodes as a number.
- `calicoapi.protocol.Protocol` is a protocol given by number or name.
  Build one with `protocol_from_int`, `protocol_from_string`,
  `protocol_from_string_v1` or `protocol_v3_from_protocol_v1`.
  `protocol_from_string` restores the usual case of the known names
  `TCP`, `UDP`, `ICMP`, `ICMPv6`, `SCTP` and `UDPLite` and keeps other
  names unchanged; the v1 form is lower case, and `Protocol.to_v1()`
  converts to it. `Protocol.supports_ports()` is true for TCP (6),
  UDP (17) and SCTP (132), by number or by name.
- `calicoapi.port.Port` is a single port, an inclusive range or a named
  port. Build it with `single_port`, `port_from_range`, `named_port` or
  `port_from_string` (`"80"`, `"100:200"`, `"http"`). Names are 1 to 128
  characters from letters, digits, `_`, `.` and `-`.
- `calicoapi.asnumber.ASNumber` is a 32-bit BGP AS number, a subclass of
  `int`. `as_number_from_string` accepts plain (`"65546"`) or dotted
  (`"1.10"`) notation.

Each type has a `from_json` class method and a `to_json` method for its
JSON form, and `str()` gives its text form. A single port and a number
encode as JSON numbers; ranges and names encode as JSON strings.

```python
from calicoapi.asnumber import as_number_from_string
from calicoapi.port import port_from_string
from calicoapi.protocol import protocol_from_string

port = port_from_string("1:10")
print(str(port), port.to_json())                      # 1:10 "1:10"
print(protocol_from_string("tcp").supports_ports())   # True
print(int(as_number_from_string("1.10")))             # 65546
```

Bad input raises `ValueError`.

## Informers and listers

`calicoapi.factory.SharedInformerFactory` hands out one shared informer
per resource type. `informer_for(obj_type, new_func)` creates the
informer on first use by calling `new_func(client, resync_period)` and
returns the same one afterwards. `start(stop_event)` runs each informer
not yet started in a daemon thread, and `wait_for_cache_sync(stop_event)`
waits for the started ones and maps each type to whether it synced.
Create a factory with `new_shared_informer_factory`,
`new_filtered_shared_informer_factory` or
`new_shared_informer_factory_with_options`, passing the options
`with_namespace`, `with_tweak_list_options` and
`with_custom_resync_config`.

`calicoapi.lister.Indexer` is a thread-safe in-memory store of objects
and their labels, keyed by name (namespaced objects under
`"<namespace>/<name>"`). A `Lister` reads from it: `list(selector)`
returns the objects whose labels match, and `get(name)` returns one
object or raises `NotFoundError`. A selector is `None` (match all), a
mapping of labels that must all be present, or a callable taking the
labels.

`calicoapi.resources.Resource` lists the resource kinds of the API group
with their singular and plural names and whether they are namespaced.
`new_lister(resource, indexer)` returns a `Lister`, or for namespaced
kinds (network policies and network sets) a `NamespacedLister`, whose
`namespace(name)` gives a `NamespaceLister` confined to one namespace.

## What the package does not do

It contains no API client and no informer implementation: it does not
talk to a server, list or watch resources, or fill an `Indexer` by
itself. The informers given to the factory, and the objects put into an
indexer, come from the caller. There is no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```