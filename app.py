# app.py
# CustomTkinter GUI for the autocorrect engine (dark theme).
# - Pick corpus files, or a folder (every *.txt below it).
# - Generator switches: prefix, whitespace, led.
# - Background build thread (keeps UI responsive).
# - Live suggestions with debounce; results & event log panes.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (ensure PYTHONPATH=src)
from autocorrect.engine import Engine
from autocorrect.loader import collect_text_files
from autocorrect.models import SuggestOptions


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def parse_led(text: str) -> int:
    """Entry text -> led bound; anything unparsable disables the generator."""
    try:
        return max(0, int(text.strip() or "0"))
    except ValueError:
        return 0


# -------------------- main app --------------------

class AutocorrectApp(ctk.CTk):
    """Dark-themed GUI that indexes a corpus and shows live suggestions."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Autocorrect")
        self.geometry("820x620")
        self.minsize(720, 520)

        # State
        self._engine: Optional[Engine] = None
        self._paths: List[str] = []
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(4, weight=1)  # results
        self.grid_rowconfigure(5, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_options()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Autocorrect", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Files", command=self._choose_files).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=1, padx=(0, 6), pady=10
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No corpus selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate")
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_options(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)

        self.var_prefix = ctk.BooleanVar(value=True)
        self.var_whitespace = ctk.BooleanVar(value=False)
        ctk.CTkCheckBox(box, text="prefix", variable=self.var_prefix,
                        command=self._on_options_changed).grid(row=0, column=0, padx=12, pady=10)
        ctk.CTkCheckBox(box, text="whitespace", variable=self.var_whitespace,
                        command=self._on_options_changed).grid(row=0, column=1, padx=6, pady=10)

        ctk.CTkLabel(box, text="led:", font=self.font_label).grid(row=0, column=2, padx=(12, 4), pady=10)
        self.entry_led = ctk.CTkEntry(box, width=56)
        self.entry_led.insert(0, "1")
        self.entry_led.grid(row=0, column=3, padx=(0, 12), pady=10)
        self.entry_led.bind("<KeyRelease>", self._on_options_changed)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=3, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Phrase:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing…")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Suggestions", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._set_results("(load a corpus and start typing)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=5, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_log = ctk.CTkTextbox(frame, height=100, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose corpus files or a folder to begin.")

    # --------- source selection ---------

    def _choose_files(self) -> None:
        paths = fd.askopenfilenames(
            title="Choose corpus files",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if paths:
            self._start_loading(list(paths), label=f"{len(paths)} file(s)")

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose corpus folder")
        if not path:
            return
        files = collect_text_files(path)
        if not files:
            mb.showinfo("No corpus", "No .txt files found in that folder.")
            return
        self._start_loading(files, label=f"Folder: {shorten_path(path)}")

    # --------- build pipeline (threaded) ---------

    def _current_options(self) -> SuggestOptions:
        return SuggestOptions(
            prefix=bool(self.var_prefix.get()),
            whitespace=bool(self.var_whitespace.get()),
            led=parse_led(self.entry_led.get()),
        )

    def _start_loading(self, paths: List[str], label: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A corpus is already loading. Please wait.")
            return

        self._paths = paths
        self.lbl_source.configure(text=label)
        self._set_status("Building index…")
        self.progress.start()
        self._engine = None

        options = self._current_options()
        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(paths, options), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, paths: List[str], options: SuggestOptions) -> None:
        engine = Engine(options)
        try:
            engine.build(paths)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(engine))

    def _on_load_ok(self, engine: Engine) -> None:
        self.progress.stop()
        self._engine = engine
        self._set_status(f"Indexed {engine.vocabulary_size:,} words.")
        self._log(f"Index ready ({engine.vocabulary_size} words from {len(self._paths)} file(s)).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while building index.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to build the index.\nSee event log for details.")

    # --------- search ---------

    def _on_options_changed(self, _ev=None) -> None:
        if self._engine is None or not self._engine.is_ready:
            return
        self._engine = self._engine.with_options(self._current_options())
        self._on_query_changed()

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q.strip():
            self._set_results("")
            return
        if self._engine is None:
            self._set_results("error: please load a corpus first.")
            self._log("Search attempted before index build.")
            return

        results = self._engine.suggest(q)
        self._set_results("\n".join(results) if results else "(no suggestions)")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        if self._engine is not None:
            self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = AutocorrectApp()
    app.mainloop()
