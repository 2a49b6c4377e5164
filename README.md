# cosmkit

Building blocks for tools that deploy and drive CosmWasm smart contracts:
abstract interfaces for execution environments, helpers for reading
transaction events, locating compiled `.wasm` files, and Cosmos key and
address encodings.

## Modules

- `cosmkit.environment` – abstract base classes an execution environment
  implements:
  - `StateInterface`: `get_address`, `set_address`, `get_code_id`,
    `set_code_id`, `get_all_addresses`, `get_all_code_ids`.
  - `ChainState`: `state()` returning a `StateInterface`.
  - `TxHandler`: `sender`, `wait_blocks`, `wait_seconds`, `next_block`
    (by default `wait_blocks(1)`), `block_info`, `execute`, `instantiate`,
    `query`, `migrate`.
  - `ChainUpload`: adds `upload(contract_source)`.
  - Value types `Coin(amount, denom)` (amount must be an unsigned 128-bit
    integer; `str(coin)` gives e.g. `"100uatom"`) and
    `BlockInfo(height, time, chain_id)` with time in nanoseconds since the
    Unix epoch.
- `cosmkit.index_response` – `Event` (with chainable `add_attribute`),
  `Attribute`, `AppResponse(events, data)` and the `IndexResponse` helpers
  `event_attr_value`, `instantiated_contract_address` and
  `uploaded_code_id`.
- `cosmkit.paths` – `WasmPath` for an existing `.wasm` file, with a
  lowercase hex SHA-256 `checksum()`, and `ArtifactsDir` with
  `find_wasm_path(name)` returning the first `.wasm` file (in sorted order)
  whose name contains `name`. `ArtifactsDir.env()` uses the directory named
  by the `ARTIFACTS_DIR` environment variable.
- `cosmkit.keys.bech32` – `encode(hrp, words)` (Bech32 checksum),
  `decode(text)` (accepts Bech32 and Bech32m checksums, returns the
  lowercase hrp and the data words), and `to_base32` / `from_base32` for
  converting between bytes and 5-bit words. Invalid input raises
  `ValueError`.
- `cosmkit.keys.public` – `PublicKey(raw_pub_key, raw_address)`, built with
  `from_public_key`, `from_account`, `from_tendermint_key`,
  `from_tendermint_address`, `from_operator_address` or `from_raw_address`,
  and rendered with `account`, `operator_address`,
  `application_public_key`, `operator_address_public_key`, `tendermint`
  and `tendermint_pubkey`. Static helpers add or strip the amino key
  prefixes and derive raw addresses from secp256k1 and ed25519 keys.
- `cosmkit.keys.signature` – `verify(pub_key, signature, blob)` checks a
  base64 64-byte compact secp256k1 signature, in low-S form, over the
  SHA-256 digest of the UTF-8 encoded `blob`, against a base64 public key.
  It returns `None` on success and raises `SignatureError` otherwise.
- `cosmkit.errors` – the `CwOrchError` exception family (`AddrNotInStore`,
  `CodeIdNotInStore`, `NotImplementedAction`, `StdError`,
  `JsonConversionError`) and its `DaemonError` branch for key handling
  (`ConversionError`, `ConversionLengthError`,
  `ConversionLengthED25519HexError`, `ConversionSecp256k1Error`,
  `ConversionED25519Error`, `ConversionPrefixED25519Error`,
  `Bech32DecodeError`, `Bech32PrefixLengthError`, `ImplementationError`,
  `SignatureError`).

## Installation

```
pip install .
```

## Examples

Reading events from a response:

```python
from cosmkit.index_response import AppResponse, Event

response = AppResponse(
    events=[
        Event("store_code").add_attribute("code_id", "1"),
        Event("instantiate").add_attribute("_contract_address", "contract0"),
    ]
)
assert response.uploaded_code_id() == 1
assert response.instantiated_contract_address() == "contract0"
```

A missing event or attribute raises `StdError`.

Deriving addresses from a compressed secp256k1 public key:

```python
from cosmkit.keys.public import PublicKey

key = PublicKey.from_public_key(bytes.fromhex(
    "02cf7ed0b5832538cd89b55084ce93399b186e381684b31388763801439cbdd20a"
))
print(key.account("terra"))
print(key.operator_address("terra"))
print(key.tendermint_pubkey("terra"))
```

Methods that need a part of the key the object does not hold (for
instance `tendermint_pubkey` on a key built from an account address) raise
`ImplementationError`.

Finding an artifact:

```python
from cosmkit.paths import ArtifactsDir

artifacts = ArtifactsDir.env()          # reads ARTIFACTS_DIR
wasm = artifacts.find_wasm_path("my_contract")
print(wasm.checksum())
```

`WasmPath` and `ArtifactsDir` raise `FileNotFoundError` for a path that
does not exist; `WasmPath` raises `StdError` for a file without the
`.wasm` suffix.

## What it does not do

`cosmkit.environment` only defines interfaces. The package ships no
concrete environment: it does not connect to a node, sign or broadcast
transactions, run contracts in-process, or persist deployment state to a
file. Those are left to classes you write on top of `TxHandler`,
`ChainUpload` and `StateInterface`. It also has no command-line interface.

## Running the tests

```
pip install ".[test]"
pytest
```