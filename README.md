# cachesim

A trace-driven simulator for set-associative caches with exact LRU
replacement. It replays a memory access trace through one of three cache
organisations and reports access and miss counts:

- **simbasica** – a single unified L1 cache for instructions and data.
- **simsplit** – separate L1 instruction (I1) and data (D1) caches.
- **simniveis** – split I1/D1 caches backed by a unified L2 cache. An L1
  miss goes on to L2; both the L1 miss and any L2 miss count towards
  `nFalhasTotal`.

## Installation

```
pip install .
```

## Input files

Every command takes exactly two arguments: a configuration file and a trace
file.

**Configuration file.** Each cache is described by three integers: the
total number of blocks, the associativity (blocks per set), and the number
of words per block. Words are 4 bytes. `simbasica` reads one cache, `simsplit`
reads two (I1 then D1), and `simniveis` reads three (I1, D1, then L2).
Integers are separated by any whitespace; anything after the needed
integers is ignored.

```
64 4 4
64 4 4
512 8 8
```

All three values must be positive and the associativity may not exceed the
number of blocks. The number of sets is the number of blocks divided by the
associativity, rounded down.

**Trace file.** One access per line: a kind letter followed by a byte
address in decimal. `I` is an instruction fetch; `L` (load) and `S`
(store) are data accesses. Blank lines are skipped. Addresses must not be
negative.

```
I 0
L 1024
I 4
S 1028
```

## Usage

```
simbasica config.txt trace.txt
simsplit config.txt trace.txt
simniveis config.txt trace.txt
```

Output of `simniveis` for the configuration and trace above:

```
nAcessosI: 2
nAcessosD: 2
nFalhasTotal: 4
Falhas I1: 1
Falhas D1: 1
Falhas L2: 2
```

`simbasica` prints `nAcessosI`, `nAcessosD` and `nFalhasL1`. `simsplit`
first prints the line `Laco da Main Concluido`, then `nAcessosI`,
`nAcessosD`, `nFalhasTotal`, `Falhas I1` and `Falhas D1`.

A wrong number of arguments, a missing file, or a malformed configuration
or trace prints a message on standard error and exits with status 1.

## Library use

```python
from cachesim.cache import Cache, AccessResult
from cachesim.trace import parse_trace, CacheConfig
from cachesim.simulators import simulate_basic

cache = Cache(n_blocks=8, associativity=2, words_per_block=4)
assert cache.lookup(0) is AccessResult.MISS
assert cache.lookup(4) is AccessResult.HIT

accesses = parse_trace("I 0\nL 64\nI 4\n")
stats = simulate_basic(CacheConfig(8, 2, 4), accesses)
print(stats.report())
```

- `cachesim.cache` – `Cache` with `lookup(address)`, which returns
  `AccessResult.HIT`, `AccessResult.MISS` (a free way was filled) or
  `AccessResult.MISS_REPLACE` (the least recently used block was evicted),
  and `decompose(address)`, which returns the `(index, tag)` pair.
- `cachesim.trace` – `parse_trace` / `read_trace` yield `Access` records of
  an `AccessKind`; `parse_config` / `read_config` return `CacheConfig`
  values.
- `cachesim.simulators` – `simulate_basic`, `simulate_split` and
  `simulate_two_level` return `BasicStats`, `SplitStats` and
  `TwoLevelStats`, each with a `report()` method giving the text the
  commands print.

## Limitations

The caches model hits and misses only: no data is stored, there is no
distinction between loads and stores (no write policy), and no timing or
cycle counts are computed. Trace files are read whole into memory before the
simulation starts.

## Running the tests

```
pip install .[test]
pytest
```