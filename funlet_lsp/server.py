from __future__ import annotations

"""
A pygls-based Language Server for Funlet.

Features:
- Text synchronization and a per-document analysis store
- Diagnostics: syntax errors and unbound identifiers
- Formatting: whole-document canonical layout
- Go to definition: identifier -> its binder in the same document
- Completion: a static list of keyword templates, with resolve

Note: every change reparses the whole document. A document whose last parse
failed keeps no tree, so formatting and definition answer with empty lists.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

from pygls.lsp.server import LanguageServer
from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    DefinitionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeConfigurationParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    DocumentFormattingParams,
    InitializedParams,
    Location,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
    TextDocumentSyncKind,
    TextEdit,
)

from funlet.analyzer import Analysis, analyze
from funlet.analysis.diagnostics import Diagnostic as FunletDiagnostic
from funlet.config import Settings, get_log_level
from funlet.types.position import Position as FunletPosition, Span
from funlet_lsp import __version__

logger = logging.getLogger(__name__)


@dataclass
class DocumentState:
    text: str
    analysis: Analysis


class FunletLanguageServer(LanguageServer):
    CMD_NAME = "funlet-ls"

    def __init__(self, settings: Settings | None = None):
        super().__init__(
            self.CMD_NAME, __version__,
            text_document_sync_kind=TextDocumentSyncKind.Incremental,
        )
        self.documents: Dict[str, DocumentState] = {}
        self.settings: Settings = settings if settings is not None else Settings.from_env()

    def analyze_document(self, uri: str, text: str) -> List[Diagnostic]:
        """Reanalyse `uri` from scratch and return its full diagnostic list."""
        analysis = analyze(text)
        self.documents[uri] = DocumentState(text=text, analysis=analysis)
        diags = [
            _to_lsp_diagnostic(d)
            for d in analysis.diagnostics(self.settings.max_number_of_problems)
        ]
        logger.debug("analysed %s: parsed=%s diagnostics=%d", uri, analysis.ok, len(diags))
        return diags

    def publish(self, uri: str, diags: List[Diagnostic]) -> None:
        # Replaces whatever the client holds for `uri`
        self.text_document_publish_diagnostics(
            PublishDiagnosticsParams(uri=uri, diagnostics=diags)
        )

    def close_document(self, uri: str) -> None:
        self.documents.pop(uri, None)

    def format_document(self, uri: str) -> List[TextEdit]:
        state = self.documents.get(uri)
        if state is None:
            return []
        formatted = state.analysis.format()
        if formatted is None:
            return []
        whole = Span(FunletPosition(0, 0), state.analysis.end_position)
        return [TextEdit(range=_to_lsp_range(whole), new_text=formatted)]

    def find_definition(self, uri: str, position: Position) -> List[Location]:
        state = self.documents.get(uri)
        if state is None:
            return []
        pos = FunletPosition(position.line, position.character)
        return [
            Location(uri=uri, range=_to_lsp_range(span))
            for span in state.analysis.definition(pos)
        ]

    def update_settings(self, payload: Any) -> Settings:
        self.settings = self.settings.merge(payload)
        logger.info("settings updated: %s", self.settings)
        return self.settings


ls = FunletLanguageServer()


@ls.feature("initialized")
def on_initialized(params: InitializedParams):
    logger.info("%s %s initialized", FunletLanguageServer.CMD_NAME, __version__)


# --- Text sync ---
@ls.feature("textDocument/didOpen")
def did_open(params: DidOpenTextDocumentParams):
    uri = params.text_document.uri
    _validate(uri, params.text_document.text or "")


@ls.feature("textDocument/didChange")
def did_change(params: DidChangeTextDocumentParams):
    uri = params.text_document.uri
    # pygls has already applied the (possibly incremental) edits
    text = ls.workspace.get_text_document(uri).source
    _validate(uri, text)


@ls.feature("textDocument/didClose")
def did_close(params: DidCloseTextDocumentParams):
    uri = params.text_document.uri
    ls.close_document(uri)
    ls.publish(uri, [])


@ls.feature("workspace/didChangeConfiguration")
def did_change_configuration(params: DidChangeConfigurationParams):
    ls.update_settings(params.settings)
    for uri, state in list(ls.documents.items()):
        _validate(uri, state.text)


def _validate(uri: str, text: str) -> None:
    ls.publish(uri, ls.analyze_document(uri, text))


# --- Formatting ---
@ls.feature("textDocument/formatting")
def on_formatting(params: DocumentFormattingParams) -> List[TextEdit]:
    return ls.format_document(params.text_document.uri)


# --- Definition ---
@ls.feature("textDocument/definition")
def on_definition(params: DefinitionParams) -> List[Location]:
    return ls.find_definition(params.text_document.uri, params.position)


# --- Completion ---
KEYWORD_COMPLETIONS: Dict[int, Dict[str, str]] = {
    1: {
        "label": "function",
        "detail": "function(x): body end",
        "documentation": "Single-parameter function. The parameter is in scope in the body only.",
    },
    2: {
        "label": "let",
        "detail": "let x = init body",
        "documentation": "Local binding. `x` is in scope in the body, not in its own initializer.",
    },
}


def completion_items() -> List[CompletionItem]:
    return [
        CompletionItem(label=item["label"], kind=CompletionItemKind.Keyword, data=data)
        for data, item in KEYWORD_COMPLETIONS.items()
    ]


@ls.feature("textDocument/completion", CompletionOptions(resolve_provider=True))
def on_completion(params: CompletionParams) -> CompletionList:
    # The list does not depend on the document or the position
    return CompletionList(is_incomplete=False, items=completion_items())


@ls.feature("completionItem/resolve")
def on_completion_resolve(item: CompletionItem) -> CompletionItem:
    return resolve_completion(item)


def resolve_completion(item: CompletionItem) -> CompletionItem:
    info = KEYWORD_COMPLETIONS.get(item.data) if isinstance(item.data, int) else None
    if info is not None:
        item.detail = info["detail"]
        item.documentation = MarkupContent(kind=MarkupKind.PlainText, value=info["documentation"])
    return item


# --- Helpers ---

def _to_lsp_position(pos: FunletPosition) -> Position:
    return Position(line=pos.line, character=pos.character)


def _to_lsp_range(span: Span) -> Range:
    return Range(start=_to_lsp_position(span.start), end=_to_lsp_position(span.end))


def _to_lsp_diagnostic(diag: FunletDiagnostic) -> Diagnostic:
    return Diagnostic(
        range=_to_lsp_range(diag.range),
        message=diag.message,
        severity=DiagnosticSeverity(int(diag.severity)),
        source=diag.source,
    )


def main():
    logging.basicConfig(level=get_log_level())
    # Run the language server over stdio
    ls.start_io()


if __name__ == "__main__":
    main()
