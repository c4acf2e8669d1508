# ugkit

Small building blocks for threaded Python programs, and a base64 tool that
works from the command line:

- `SpinLock` (`ugkit.spin_lock`): a busy-waiting lock that yields the CPU
  after a burst of failed attempts. It works as a context manager.
- `RingBuffer` (`ugkit.ring_buffer`): a fixed-capacity FIFO for one producer
  thread and one consumer thread. It raises `BufferFull` or `BufferEmpty`
  instead of waiting.
- `RingBufferEx` (`ugkit.ring_buffer_ex`): a fixed-capacity FIFO that is safe
  for many threads. Its `push` and `pop` either fail at once or spin until
  they succeed.
- `ThreadSafeQueue` (`ugkit.thread_safe_queue`): a bounded FIFO built on
  condition variables. `resize` changes its bound. Non-blocking calls that
  cannot proceed raise `QueueFull` or `QueueEmpty`.
- `ThreadPool` (`ugkit.thread_pool`): worker threads that run callables taken
  from a bounded task queue.
- `SortVector` (`ugkit.sort_vector`): keeps values in ascending order under a
  three-way comparison function. An equal value is counted instead of being
  stored again. `pop` returns the largest value.
- `ugkit.base64_tool`: the `encode` and `decode` functions, and the
  `ugkit-base64` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Spin lock

```python
from ugkit.spin_lock import SpinLock

lock = SpinLock()
counter = 0

with lock:
    counter += 1
```

`acquire()` and `release()` can also be called directly. Calling `release()`
on a lock that is not held raises `RuntimeError`.

### Ring buffer

```python
from ugkit.ring_buffer import RingBuffer, BufferFull, BufferEmpty

buf = RingBuffer(2)
buf.push(1)
buf.push(2)
try:
    buf.push(3)
except BufferFull:
    pass

assert len(buf) == 2
assert buf.capacity == 2
assert buf.pop() == 1
assert buf.pop() == 2
try:
    buf.pop()
except BufferEmpty:
    pass
```

A negative capacity raises `ValueError`.

### Blocking ring buffer

```python
from ugkit.ring_buffer_ex import RingBufferEx

buf = RingBufferEx(1024)
buf.push("job", block=True)   # spins until there is room
item = buf.pop(block=True)    # spins until an item is there
```

If `block` is false, which is the default, a full buffer makes `push` raise
`BufferFull`. An empty buffer makes `pop` raise `BufferEmpty`. Both
exceptions come from `ugkit.ring_buffer`.

### Thread-safe queue

```python
from ugkit.thread_safe_queue import ThreadSafeQueue, QueueFull

queue = ThreadSafeQueue(1024)
queue.push(42, block=True)
assert queue.pop(block=True) == 42

queue.resize(1)
queue.push("a")
try:
    queue.push("b")
except QueueFull:
    pass
assert len(queue) == 1
```

With `block=True`, `push` waits for room and `pop` waits for an item. Raising
the bound with `resize` wakes pushers that are waiting.

### Thread pool

```python
import threading
from ugkit.thread_pool import ThreadPool

done = threading.Event()

pool = ThreadPool()
pool.start(4)
pool.add_task(done.set)
done.wait()
pool.stop()
```

- `start(thread_cnt)` starts the workers. The default is
  `ThreadPool.DEFAULT_THREAD_CNT`, which is 4. Calling it on a running pool
  does nothing.
- `add_task` blocks while the queue is full. It holds
  `ThreadPool.DEFAULT_TASK_CNT` (1024) tasks unless `set_pool_task_cnt(n)`
  changes that.
- `stop()` lets the tasks already queued finish, then joins every worker.
- A task that raises is logged through the `ugkit.thread_pool` logger. The
  worker keeps running.

### Sorted vector

The comparison function returns 0 when its two arguments are equal. It
returns a positive number when the first is larger and a negative number when
it is smaller. Without a function, the values' own ordering is used.

```python
from ugkit.sort_vector import SortVector

sv = SortVector(lambda a, b: a - b)
for value in (5, 1, 3, 3):
    sv.push(value)

print(list(sv))   # [1, 3, 5]: each distinct value once, ascending
print(len(sv))    # 3 distinct values
print(sv.pop())   # 5
print(sv.pop())   # 3 (one of its two copies)
```

`pop` on an empty `SortVector` raises `IndexError`.

### Base64

```python
from ugkit.base64_tool import encode, decode, InvalidBase64Error

encoded = encode("Man")        # "TWFu"
print(decode(encoded))         # b"Man"

try:
    decode("abc")
except InvalidBase64Error:
    print("not valid base64")
```

`encode` accepts `str`, which it encodes as UTF-8, or `bytes`. `decode`
returns `bytes`, three for every four characters.

This encoding differs from standard base64 padding. When the input length is
not a multiple of three, the last group is filled out with `=` bytes
(`0x3d`) before it is encoded. So the output never ends in `=` characters,
and decoding returns those fill bytes as well. `decode` rejects any text
whose length is not a multiple of four and any character outside `A–Z`,
`a–z`, `0–9`, `+`, `/` and `=`. A `=` character inside a group is also
rejected, because it has no value. Every rejection raises
`InvalidBase64Error`, which is a subclass of `ValueError`.

From the command line:

```
ugkit-base64 encode Man
ugkit-base64 decode TWFu
```

- `encode` prints the encoded text, then a line with the code of each output
  character in hexadecimal.
- `decode` prints the decoded bytes as UTF-8 text. Bytes that are not valid
  UTF-8 are replaced.
- Problems are reported on standard error: a missing argument, invalid
  input, or an unknown operation.
- The exit status is 1 only when no operation is given.

## What it does not do

- `ThreadPool` returns no results or futures from tasks. A task's exception
  is only logged.
- The base64 functions do not produce or accept standard `=` padding, so
  their output is not interchangeable with `base64.b64encode` when the input
  length is not a multiple of three.