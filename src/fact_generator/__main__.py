from fact_generator.server import main

main()
