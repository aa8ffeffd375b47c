from backend_copier.cli import main

if __name__ == "__main__":
    main()
