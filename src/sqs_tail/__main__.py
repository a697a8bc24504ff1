from sqs_tail.main import main

main()
