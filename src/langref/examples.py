"""
Example reference document used by the demos and tests.

Builds a small Python / JavaScript / Go comparison covering the topics of
the reference manual: printing, loops, error handling, file I/O, regular
expressions, classes, database access, async code and API calls.
"""
from langref.model import Document
from langref.store import load_document

EXAMPLE_RECORDS = [
    {
        "title": "Basics",
        "entries": [
            {
                "task": "Print to console",
                "description": "Write a line to standard output.",
                "snippets": {
                    "python": 'print("x")',
                    "javascript": 'console.log("x");',
                    "go": 'fmt.Println("x")',
                },
            },
            {
                "task": "Loop over a list",
                "snippets": {
                    "python": "for item in items:\n    print(item)",
                    "javascript": "for (const item of items) {\n  console.log(item);\n}",
                    "go": "for _, item := range items {\n\tfmt.Println(item)\n}",
                },
            },
        ],
    },
    {
        "title": "Error handling",
        "entries": [
            {
                "task": "Catch an error",
                "description": "Go returns errors as values instead of raising them.",
                "snippets": {
                    "python": "try:\n    risky()\nexcept ValueError as e:\n    log(e)",
                    "javascript": "try {\n  risky();\n} catch (e) {\n  log(e);\n}",
                    "go": "if err := risky(); err != nil {\n\tlog(err)\n}",
                },
            },
        ],
    },
    {
        "title": "File I/O",
        "entries": [
            {
                "task": "Read a whole file",
                "snippets": {
                    "python": 'text = open("a.txt").read()',
                    "javascript": 'const text = fs.readFileSync("a.txt", "utf8");',
                    "go": 'data, err := os.ReadFile("a.txt")',
                },
            },
        ],
    },
    {
        "title": "Regular expressions",
        "entries": [
            {
                "task": "Match alternatives",
                "description": "The pipe is an ordinary character inside a table cell once escaped.",
                "snippets": {
                    "python": 're.match(r"cat|dog", s)',
                    "javascript": "/cat|dog/.test(s)",
                    "go": 'regexp.MustCompile("cat|dog").MatchString(s)',
                },
            },
        ],
    },
    {
        "title": "Object-oriented syntax",
        "entries": [
            {
                "task": "Define a class",
                "description": "Go has no classes; a struct with methods plays the same role.",
                "snippets": {
                    "python": "class Point:\n    def __init__(self, x):\n        self.x = x",
                    "javascript": "class Point {\n  constructor(x) { this.x = x; }\n}",
                    "go": "type Point struct {\n\tX int\n}",
                },
            },
        ],
    },
    {
        "title": "Database access",
        "entries": [
            {
                "task": "Run a query",
                "snippets": {
                    "python": 'rows = conn.execute("SELECT * FROM t").fetchall()',
                    "go": 'rows, err := db.Query("SELECT * FROM t")',
                },
            },
        ],
    },
    {
        "title": "Asynchronous programming",
        "entries": [
            {
                "task": "Await a result",
                "snippets": {
                    "python": "result = await fetch()",
                    "javascript": "const result = await fetch();",
                },
            },
        ],
    },
    {
        "title": "API consumption",
        "entries": [
            {
                "task": "GET JSON",
                "snippets": {
                    "python": 'data = requests.get(url).json()',
                    "javascript": "const data = await (await fetch(url)).json();",
                    "go": "resp, err := http.Get(url)",
                },
            },
        ],
    },
]


def build_example_document(title: str = "Language Reference") -> Document:
    return load_document(EXAMPLE_RECORDS, title=title)
