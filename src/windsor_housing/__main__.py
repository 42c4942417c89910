from windsor_housing.run_analysis import main

if __name__ == "__main__":
    main()
