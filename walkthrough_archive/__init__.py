"""
Walkthrough Archive: This Week in Rust walkthrough collector

Crawls the This Week in Rust issue archive, collects the articles listed
under each issue's "Rust Walkthroughs" section, caches them locally and
optionally exports the linked pages as plain text.
"""

__version__ = "1.0"
__author__ = "Walkthrough Archive Project"
__description__ = "This Week in Rust walkthrough collector"
