#!/usr/bin/env python3
"""
Main test runner for fnlang lexer tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)

def run_all_tests():
    """Run all fnlang tests."""
    
    print("🚀 fnlang Lexer Test Suite")
    print("=" * 60)
    
    # Test if basic imports work
    try:
        from fnlang.lexer import Lexer, LexerError
        
        print("✅ Lexer modules imported successfully")
        print()
        
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False
    
    # Smoke test on a small program
    print("Testing simple tokenization...")
    code = "fn\nmain():i32{\nreturn\n0\n}"
    try:
        tokens = Lexer("<smoke>").tokenize(code)
        print(f"     Generated {len(tokens)} tokens")
        for spanned in tokens:
            print(f"       {spanned}")
    except LexerError as e:
        print(f"❌ Tokenization FAILED:\n{e}")
        return False
    
    print("  ❌ Testing error reporting...")
    try:
        Lexer("<smoke>").tokenize("fn main")
        print("     ❌ Expected an error for the space but got none")
        return False
    except LexerError as e:
        print(f"     ✅ Caught expected error: {e.diagnostic.message} at {e.location}")
    print()
    
    # Run the unit tests
    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    
    print()
    if result.wasSuccessful():
        print("🎉 All tests PASSED!")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    
    return result.wasSuccessful()

if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
