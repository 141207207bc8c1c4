"""Enumerations used by interactive elements."""

from enum import Enum


class Icon(str, Enum):
    """Icons available to icon buttons."""

    TRASH = "trash"


class FileType(str, Enum):
    """File types accepted by file inputs."""

    AUTO = "auto"
    TEXT = "text"
    AI = "ai"
    APK = "apk"
    APPLESCRIPT = "applescript"
    BINARY = "binary"
    BMP = "bmp"
    BOXNOTE = "boxnote"
    C = "c"
    CSHARP = "csharp"
    CPP = "cpp"
    CSS = "css"
    CSV = "csv"
    CLOJURE = "clojure"
    COFFEESCRIPT = "coffeescript"
    CFM = "cfm"
    D = "d"
    DART = "dart"
    DIFF = "diff"
    DOC = "doc"
    DOCX = "docx"
    DOCKERFILE = "dockerfile"
    DOTX = "dotx"
    EMAIL = "email"
    EPS = "eps"
    EPUB = "epub"
    ERLANG = "erlang"
    FLA = "fla"
    FLV = "flv"
    FSHARP = "fsharp"
    FORTRAN = "fortran"
    GDOC = "gdoc"
    GDRAW = "gdraw"
    GIF = "gif"
    GO = "go"
    GPRES = "gpres"
    GROOVY = "groovy"
    GSHEET = "gsheet"
    GZIP = "gzip"
    HTML = "html"
    HANDLEBARS = "handlebars"
    HASKELL = "haskell"
    HAXE = "haxe"
    INDD = "indd"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    JPG = "jpg"
    JSON = "json"
    KEYNOTE = "keynote"
    KOTLIN = "kotlin"
    LATEX = "latex"
    LISP = "lisp"
    LUA = "lua"
    M4A = "m4a"
    MARKDOWN = "markdown"
    MATLAB = "matlab"
    MHTML = "mhtml"
    MKV = "mkv"
    MOV = "mov"
    MP3 = "mp3"
    MP4 = "mp4"
    MPG = "mpg"
    MUMPS = "mumps"
    NUMBERS = "numbers"
    NZB = "nzb"
    OBJC = "objc"
    OCAML = "ocaml"
    ODG = "odg"
    ODI = "odi"
    ODP = "odp"
    ODS = "ods"
    ODT = "odt"
    OGG = "ogg"
    OGV = "ogv"
    PAGES = "pages"
    PASCAL = "pascal"
    PDF = "pdf"
    PERL = "perl"
    PHP = "php"
    PIG = "pig"
    PNG = "png"
    POST = "post"
    POWERSHELL = "powershell"
    PPT = "ppt"
    PPTX = "pptx"
    PSD = "psd"
    PUPPET = "puppet"
    PYTHON = "python"
    QTZ = "qtz"
    R = "r"
    RTF = "rtf"
    RUBY = "ruby"
    RUST = "rust"
    SQL = "sql"
    SASS = "sass"
    SCALA = "scala"
    SCHEME = "scheme"
    SKETCH = "sketch"
    SHELL = "shell"
    SMALLTALK = "smalltalk"
    SVG = "svg"
    SWF = "swf"
    SWIFT = "swift"
    TAR = "tar"
    TIFF = "tiff"
    TSV = "tsv"
    VB = "vb"
    VBSCRIPT = "vbscript"
    VCARD = "vcard"
    VELOCITY = "velocity"
    VERILOG = "verilog"
    WAV = "wav"
    WEBM = "webm"
    WMV = "wmv"
    XLS = "xls"
    XLSX = "xlsx"
    XLSB = "xlsb"
    XLSM = "xlsm"
    XLTX = "xltx"
    XML = "xml"
    YAML = "yaml"
    ZIP = "zip"
