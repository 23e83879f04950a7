"""Shared fixtures and sample diffs for diffview tests."""

import pytest

from diffview.diff_hunk_parser import HunkParser
from diffview.diff_parser import UnifiedDiffParser
from diffview.diff_word_engine import WordDiffEngine


MODIFIED_FILE_DIFF = """diff --git a/src/app.js b/src/app.js
index 83db48f..bf269f4 100644
--- a/src/app.js
+++ b/src/app.js
@@ -1,4 +1,4 @@ function main()
 const a = 0;
-const x = 1;
+const x = 2;
 const y = 3;
"""

MULTI_FILE_DIFF = """diff --git a/README.md b/README.md
new file mode 100644
index 0000000..e69de29
--- /dev/null
+++ b/README.md
@@ -0,0 +1,2 @@
+# Title
+Some text
diff --git a/old.txt b/old.txt
deleted file mode 100644
index e69de29..0000000
--- a/old.txt
+++ /dev/null
@@ -1,3 +0,0 @@
-one
-two
-three
diff --git a/lib/util.py b/lib/helpers.py
similarity index 90%
rename from lib/util.py
rename to lib/helpers.py
index 1111111..2222222 100644
--- a/lib/util.py
+++ b/lib/helpers.py
@@ -10,3 +10,3 @@ def helper():
     value = compute()
-    return value
+    return value * 2
     # end
@@ -40,2 +40,3 @@ class Helper:
     pass
+    extra = True
     done = False
"""

BINARY_DIFF = """diff --git a/logo.png b/logo.png
index 1234567..89abcde 100644
Binary files a/logo.png and b/logo.png differ
diff --git a/notes.txt b/notes.txt
index 1234567..89abcde 100644
--- a/notes.txt
+++ b/notes.txt
@@ -1 +1 @@
-first
+second
"""


@pytest.fixture
def parser():
    """Create a unified diff parser."""
    return UnifiedDiffParser()


@pytest.fixture
def hunk_parser():
    """Create a hunk parser."""
    return HunkParser()


@pytest.fixture
def engine():
    """Create a word diff engine with the default block size."""
    return WordDiffEngine()


@pytest.fixture
def modified_file_diff():
    """Single modified file with one replaced line."""
    return MODIFIED_FILE_DIFF


@pytest.fixture
def multi_file_diff():
    """Added, deleted and renamed files in one diff."""
    return MULTI_FILE_DIFF


@pytest.fixture
def binary_diff():
    """A binary file followed by a text file."""
    return BINARY_DIFF
