from __future__ import annotations

"""
A minimal pygls-based Language Server for lithp.

Every line of a document is one REPL input, so analysis is per line:
- Diagnostics: parse failures (Error) and lines that evaluate to an Error
  value (Warning)
- Hover: the printed value of the line under the cursor
- Completion: the arithmetic operators and the reserved words
"""

import logging
from typing import List, Optional

from pygls.lsp.server import LanguageServer
from lsprotocol.types import (
    TEXT_DOCUMENT_DID_OPEN,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_HOVER,
    TEXT_DOCUMENT_COMPLETION,
    CompletionItem,
    CompletionItemKind,
    CompletionList,
    CompletionOptions,
    CompletionParams,
    Diagnostic,
    DiagnosticSeverity,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    Hover,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    PublishDiagnosticsParams,
    Range,
)

from lithp import __version__
from lithp.errors import LithpSyntaxError
from lithp.evaluation.operators import Operator
from lithp.interpreter import Interpreter
from lithp.printer import lval_str
from lithp.types import Error

logger = logging.getLogger(__name__)

SOURCE = "lithp-ls"

OPERATOR_DOCS = {
    Operator.ADD: "(+ n ...) sum of all operands",
    Operator.SUB: "(- n ...) left-to-right difference; (- n) negates",
    Operator.MUL: "(* n ...) product of all operands",
    Operator.DIV: "(/ n ...) left-to-right division, truncating toward zero",
}

server = LanguageServer(SOURCE, f"v{__version__}")
_interp = Interpreter(filename="<document>")


def _line_range(line_no: int, text: str) -> Range:
    return Range(
        start=Position(line=line_no, character=0),
        end=Position(line=line_no, character=len(text)),
    )


def line_diagnostics(text: str) -> List[Diagnostic]:
    diags: List[Diagnostic] = []
    for line_no, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        try:
            value = _interp.eval(line)
        except LithpSyntaxError as ex:
            start = Position(line=line_no, character=max(ex.col - 1, 0))
            diags.append(
                Diagnostic(
                    range=Range(start=start, end=Position(line=line_no, character=start.character + 1)),
                    message=ex.description,
                    severity=DiagnosticSeverity.Error,
                    source=SOURCE,
                )
            )
            continue
        if isinstance(value, Error):
            diags.append(
                Diagnostic(
                    range=_line_range(line_no, line),
                    message=value.message,
                    severity=DiagnosticSeverity.Warning,
                    source=SOURCE,
                )
            )
    return diags


def hover_text(text: str, line_no: int) -> Optional[str]:
    lines = text.splitlines()
    if line_no >= len(lines) or not lines[line_no].strip():
        return None
    try:
        return lval_str(_interp.eval(lines[line_no]))
    except LithpSyntaxError:
        return None


def completion_items() -> List[CompletionItem]:
    items: List[CompletionItem] = []
    for op in Operator:
        if op.is_arithmetic:
            items.append(CompletionItem(label=op.value, kind=CompletionItemKind.Operator, detail=OPERATOR_DOCS[op]))
        else:
            items.append(CompletionItem(label=op.value, kind=CompletionItemKind.Keyword, detail="reserved"))
    return items


def _publish(ls: LanguageServer, uri: str) -> None:
    doc = ls.workspace.get_text_document(uri)
    ls.text_document_publish_diagnostics(
        PublishDiagnosticsParams(uri=uri, version=doc.version, diagnostics=line_diagnostics(doc.source))
    )


@server.feature(TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: LanguageServer, params: DidOpenTextDocumentParams):
    logger.info("opened %s", params.text_document.uri)
    _publish(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CHANGE)
def did_change(ls: LanguageServer, params: DidChangeTextDocumentParams):
    _publish(ls, params.text_document.uri)


@server.feature(TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: LanguageServer, params: DidCloseTextDocumentParams):
    ls.text_document_publish_diagnostics(PublishDiagnosticsParams(uri=params.text_document.uri, diagnostics=[]))


@server.feature(TEXT_DOCUMENT_HOVER)
def on_hover(ls: LanguageServer, params: HoverParams) -> Optional[Hover]:
    doc = ls.workspace.get_text_document(params.text_document.uri)
    value = hover_text(doc.source, params.position.line)
    if value is None:
        return None
    return Hover(contents=MarkupContent(kind=MarkupKind.PlainText, value=value))


@server.feature(TEXT_DOCUMENT_COMPLETION, CompletionOptions(trigger_characters=["("]))
def on_completion(ls: LanguageServer, params: CompletionParams) -> CompletionList:
    return CompletionList(is_incomplete=False, items=completion_items())


if __name__ == "__main__":
    # Run the language server over stdio
    server.start_io()
