from task_clock.cli import main

if __name__ == "__main__":
    main()
