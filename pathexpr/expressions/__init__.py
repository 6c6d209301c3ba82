"""
Path expression language.

Expressions and predicates over glob-style metric paths:

    2 * "A.*.B" + "X.Y.*" / 4 >= "K.*.M"

Every ``*`` across every variable must bind to the same substring; when no
consistent binding exists in the symbol table the result is None.

Modules:
- glob.py: Glob to anchored regex compiler
- matcher.py: Wildcard-consistent resolver and PathMatcher
- nodes/: Frozen AST node types
- evaluation/: Tree evaluation and resolution
- parser.py: Tokenizer and recursive-descent parser
- symbols.py: Symbol table loading (YAML/JSON/CSV)
- frames.py: Vectorised evaluation over DataFrames
"""

from .glob import CompiledPattern, compile_glob
from .types import (
    SymbolTable,
    Bindings,
    TieBreak,
    DEFAULT_TIE_BREAK,
    ResolveReason,
    Match,
    Resolution,
)
from .matcher import (
    PathMatcher,
    match_variables,
    resolve_variables,
)
from .nodes import (
    Constant,
    Variable,
    BinaryExpr,
    Comparison,
    Plus,
    Minus,
    Multiply,
    Divide,
    LT,
    LTE,
    EQ,
    GTE,
    GT,
    Expression,
    Predicate,
    Node,
    get_referenced_globs,
    to_text,
    node_to_dict,
)
from .evaluation import evaluate_node, explain_node, resolve_node
from .parser import (
    ExpressionSyntaxError,
    parse_expression,
    parse_predicate,
    parse_node,
)
from .symbols import SymbolTableError, flatten_mapping, load_symbol_table
from .frames import FrameError, evaluate_frame

__all__ = [
    # Glob compiler
    "CompiledPattern",
    "compile_glob",
    # Types
    "SymbolTable",
    "Bindings",
    "TieBreak",
    "DEFAULT_TIE_BREAK",
    "ResolveReason",
    "Match",
    "Resolution",
    # Matcher
    "PathMatcher",
    "match_variables",
    "resolve_variables",
    # Nodes
    "Constant",
    "Variable",
    "BinaryExpr",
    "Comparison",
    "Plus",
    "Minus",
    "Multiply",
    "Divide",
    "LT",
    "LTE",
    "EQ",
    "GTE",
    "GT",
    "Expression",
    "Predicate",
    "Node",
    "get_referenced_globs",
    "to_text",
    "node_to_dict",
    # Evaluation
    "evaluate_node",
    "explain_node",
    "resolve_node",
    # Parser
    "ExpressionSyntaxError",
    "parse_expression",
    "parse_predicate",
    "parse_node",
    # Symbol tables
    "SymbolTableError",
    "flatten_mapping",
    "load_symbol_table",
    # Frames
    "FrameError",
    "evaluate_frame",
]
