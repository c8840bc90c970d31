"""Closed word lists used to classify hs_err report text."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache
import re
from typing import Final

SECTION_TITLES: Final[frozenset[str]] = frozenset(
    {
        "Heap",
        "Compilation events",
        "GC Heap History",
        "Dll operation events",
        "Deoptimization events",
        "Classes loaded",
        "Classes unloaded",
        "Classes redefined",
        "Classes loaded/unloaded/redefined",
        "Internal exceptions",
        "ZGC Phase Switch",
        "VM Operations",
        "Memory protections",
        "Nmethod flushes",
        "Events",
        "Dynamic libraries",
        "VM Arguments",
        "Logging",
        "Environment Variables",
        "Active Locale",
        "Signal Handlers",
        "Native Memory Tracking",
    }
)

SUBSECTION_TITLES: Final[frozenset[str]] = frozenset(
    {
        # summary
        "Command Line",
        "Host",
        "Time",
        # thread
        "Current thread",
        "Current CompileTask",
        "Stack",
        "Native frames",
        "Java frames",
        "siginfo",
        "Registers",
        "Register to memory mapping",
        "Top of Stack",
        "Instructions",
        "Stack slot to memory mapping",
        # process
        "Threads class SMR info",
        "Java Threads",
        "Other Threads",
        "Threads with active compile tasks",
        "VM state",
        "VM Mutex/Monitor currently owned by a thread",
        "Heap address",
        "CDS",
        "CDS archive(s) mapped at",
        "Compressed class space mapped at",
        "Narrow klass base",
        "GC Precious Log",
        # heap
        "Heap Regions",
        "Card table byte_map",
        "Marking Bits",
        "Polling page",
        "Metaspace",
        "Usage",
        "Virtual space",
        "Chunk freelists",
        "MaxMetaspaceSize",
        "CompressedClassSpaceSize",
        "Initial GC threshold",
        "Current GC threshold",
        "Internal statistics",
        "CodeHeap",
        "CodeCache",
        # vm arguments
        "jvm_args",
        "java_command",
        "java_class_path (initial)",
        "java_class_path",
        "Launcher Type",
        # system
        "OS",
        "uname",
        "OS uptime",
        "libc",
        "rlimit",
        "rlimit (soft/hard)",
        "load average",
        "Process Memory",
        "CPU",
        "Memory",
        "vm_info",
    }
)

KEYWORDS: Final[frozenset[str]] = frozenset(
    {
        "safepoint",
        "VMThread",
        "WatcherThread",
        "GCTaskThread",
        "ConcurrentGCThread",
        "JavaThread",
        "CompilerThread",
        "LD_LIBRARY_PATH",
        "DYLD_LIBRARY_PATH",
        "LD_PRELOAD",
        "DYLD_INSERT_LIBRARIES",
        "LDR_PRELOAD",
        "LDR_PRELOAD64",
        "C1",
        "C2",
        "nmethod",
        "daemon",
        # thread states
        "_thread_new",
        "_thread_in_native",
        "_thread_in_vm",
        "_thread_in_Java",
        "_thread_blocked",
        "_thread_uninitialized",
        # VM operations
        "Halt",
        "SafepointALot",
        "Cleanup",
        "ForceSafepoint",
        "ICBufferFull",
        "VM_ClearICs",
        "CleanClassLoaderDataMetaspaces",
        "DeoptimizeFrame",
        "DeoptimizeAll",
        "ZombieAll",
        "PrintThreads",
        "PrintMetadata",
        "FindDeadlocks",
        "Exit",
        "ThreadDump",
        "PrintCompileQueue",
        "PrintClassHierarchy",
        "HandshakeAllThreads",
    }
)

SIGNALS: Final[frozenset[str]] = frozenset(
    {
        "SIGSEGV",
        "SIGBUS",
        "SIGILL",
        "SIGFPE",
        "SIGABRT",
        "SIGTRAP",
        "SIGKILL",
        "SIGTERM",
        "SIGQUIT",
        "SIGINT",
        "SIGHUP",
        "SIGPIPE",
        "SIGUSR1",
        "SIGUSR2",
        "SIGXFSZ",
        "SIGSYS",
        "SIGCHLD",
        "SIGPROF",
        "SIGALRM",
        "SIGCONT",
        "SIGSTOP",
        "EXCEPTION_ACCESS_VIOLATION",
        "EXCEPTION_STACK_OVERFLOW",
        "EXCEPTION_ILLEGAL_INSTRUCTION",
        "EXCEPTION_INT_DIVIDE_BY_ZERO",
        "EXCEPTION_IN_PAGE_ERROR",
        "EXCEPTION_PRIV_INSTRUCTION",
        "EXC_BAD_ACCESS",
        "SEGV_MAPERR",
        "SEGV_ACCERR",
        "SEGV_BNDERR",
        "SEGV_PKUERR",
        "BUS_ADRALN",
        "BUS_ADRERR",
        "BUS_OBJERR",
        "ILL_ILLOPC",
        "ILL_ILLOPN",
        "ILL_ILLADR",
        "ILL_ILLTRP",
        "ILL_PRVOPC",
        "ILL_PRVREG",
        "ILL_COPROC",
        "ILL_BADSTK",
        "FPE_INTDIV",
        "FPE_INTOVF",
        "FPE_FLTDIV",
        "FPE_FLTOVF",
        "FPE_FLTUND",
        "FPE_FLTRES",
        "FPE_FLTINV",
        "FPE_FLTSUB",
    }
)


def _numbered(prefix: str, count: int) -> set[str]:
    return {f"{prefix}{index}" for index in range(count)}


REGISTERS: Final[frozenset[str]] = frozenset(
    {
        # x86_64
        "RAX",
        "RBX",
        "RCX",
        "RDX",
        "RSP",
        "RBP",
        "RSI",
        "RDI",
        "RIP",
        "EFLAGS",
        "CSGSFS",
        "ERR",
        "TRAPNO",
        *{f"R{index}" for index in range(8, 16)},
        # x86
        "EAX",
        "EBX",
        "ECX",
        "EDX",
        "ESP",
        "EBP",
        "ESI",
        "EDI",
        "EIP",
        "CR2",
        # aarch64 / arm / ppc
        *_numbered("x", 31),
        *_numbered("R", 31),
        *_numbered("r", 32),
        "sp",
        "pc",
        "lr",
        "fp",
        "cpsr",
        "ctr",
        "SP",
        "PC",
        "LR",
        *_numbered("XMM", 16),
    }
)

_TITLE_TAIL = (
    # `Title:` keeps its colon; `Title (qualifier):` stops before the qualifier.
    r"(?:[ \t]*:(?![/\\])"
    r"|(?=[ \t]*(?:\([^\r\n()]*\)|\[[^\r\n\]]*\]|'[^\r\n']*')[ \t]*:(?![/\\])))"
)
_LABEL_PATTERN = re.compile(r"[A-Za-z][\w./-]*(?: [\w./-]+){0,4}" + _TITLE_TAIL)
_LABEL_MAX_LENGTH: Final[int] = 48


@lru_cache(maxsize=32)
def _alternation_pattern(words: frozenset[str], suffix: str) -> re.Pattern[str] | None:
    if not words:
        return None
    # Longest alternatives first so `Heap Regions` wins over `Heap`.
    ordered = sorted(words, key=lambda word: (-len(word), word))
    return re.compile("(?:" + "|".join(re.escape(word) for word in ordered) + ")" + suffix)


@dataclass(frozen=True, slots=True)
class Vocabulary:
    """Word lists driving title, keyword, signal and register classification."""

    section_titles: frozenset[str] = SECTION_TITLES
    subsection_titles: frozenset[str] = SUBSECTION_TITLES
    keywords: frozenset[str] = KEYWORDS
    signals: frozenset[str] = SIGNALS
    registers: frozenset[str] = REGISTERS
    permissive_labels: bool = False

    def extended(
        self,
        *,
        section_titles: Iterable[str] = (),
        subsection_titles: Iterable[str] = (),
        keywords: Iterable[str] = (),
        signals: Iterable[str] = (),
        permissive_labels: bool | None = None,
    ) -> "Vocabulary":
        return Vocabulary(
            section_titles=self.section_titles | frozenset(section_titles),
            subsection_titles=self.subsection_titles | frozenset(subsection_titles),
            keywords=self.keywords | frozenset(keywords),
            signals=self.signals | frozenset(signals),
            registers=self.registers,
            permissive_labels=self.permissive_labels if permissive_labels is None else permissive_labels,
        )

    def match_section_title(self, text: str, pos: int) -> int:
        """Length of the section title starting at `pos`, or 0."""
        return _match_length(_alternation_pattern(self.section_titles, _TITLE_TAIL), text, pos)

    def match_subsection_title(self, text: str, pos: int) -> int:
        """Length of the subsection title starting at `pos`, or 0.

        Falls back to the generic short-label rule when permissive labels are on.
        """
        length = _match_length(_alternation_pattern(self.subsection_titles, _TITLE_TAIL), text, pos)
        if length or not self.permissive_labels:
            return length
        length = _match_length(_LABEL_PATTERN, text, pos)
        return length if length <= _LABEL_MAX_LENGTH else 0

    def match_register(self, text: str, pos: int) -> int:
        """Length of a `NAME=0x...` register pair starting at `pos`, or 0."""
        return _match_length(
            _alternation_pattern(self.registers, r"[ \t]*=[ \t]*0[xX][0-9a-fA-F]+"),
            text,
            pos,
        )

    def is_signal(self, word: str) -> bool:
        return word in self.signals

    def is_keyword(self, word: str) -> bool:
        return word in self.keywords


def _match_length(pattern: re.Pattern[str] | None, text: str, pos: int) -> int:
    if pattern is None:
        return 0
    match = pattern.match(text, pos)
    if match is None:
        return 0
    return match.end() - pos


DEFAULT_VOCABULARY: Final[Vocabulary] = Vocabulary()
