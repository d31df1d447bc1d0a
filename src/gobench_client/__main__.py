from gobench_client.cli.main import main

main()
