from tfidf_search.cli import main

main()
